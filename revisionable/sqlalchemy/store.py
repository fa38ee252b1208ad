from sqlalchemy.orm import class_mapper

from revisionable.resolver import RecordStore


class SessionStore(RecordStore):
    '''Find records through a SQLAlchemy (scoped) session.

    Revisions store ids as text so the id is first converted to the type of
    the model's primary key. For integer keys integral floats count too
    ('5.0' finds record 5). An id that does not convert cannot match any
    record and gives None, as does a model with a composite primary key.
    '''

    def __init__(self, session):
        self.session = session

    def find(self, model, record_id):
        pk = self.coerce_id(model, record_id)
        if pk is None:
            return None
        return self.session.get(model, pk)

    def coerce_id(self, model, record_id):
        if record_id is None:
            return None
        pkcols = class_mapper(model).primary_key
        if len(pkcols) != 1:
            return None
        try:
            python_type = pkcols[0].type.python_type
        except NotImplementedError:
            return record_id
        if isinstance(record_id, python_type):
            return record_id
        try:
            return python_type(record_id)
        except (TypeError, ValueError):
            pass
        if python_type is int:
            return self._integral(record_id)
        return None

    def _integral(self, record_id):
        try:
            number = float(record_id)
        except (TypeError, ValueError):
            return None
        if number.is_integer():
            return int(number)
        return None
