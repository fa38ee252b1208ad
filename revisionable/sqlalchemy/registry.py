from sqlalchemy.orm import class_mapper
from sqlalchemy.orm.exc import UnmappedClassError

from revisionable.registry import ModelRegistry

import logging
logger = logging.getLogger('revisionable')


class MapperRegistry(ModelRegistry):
    '''Registry taking relations from the SQLAlchemy mapper of each model.

    Only scalar relationships (many-to-one, one-to-one) are relations in
    the revision sense: a foreign key column on the subject pointing at one
    related record.
    '''

    def discover_relations(self, model):
        try:
            mapper = class_mapper(model)
        except UnmappedClassError:
            logger.warning('Not discovering relations of unmapped %s' % model)
            return {}
        relations = {}
        for prop in mapper.relationships:
            if not prop.uselist:
                relations[prop.key] = prop.mapper.class_
        return relations
