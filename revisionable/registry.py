'''Explicit registry of revisionable types and the relations between them.

Revisions refer to their subject by type name (a string stored in the
revision table). The registry maps those names back to model classes and
answers "does type X have relation Y, and where does it point" for the
resolver. Nothing is found by reflection: a type the registry was not told
about does not exist as far as resolution is concerned.
'''
from collections import namedtuple

import logging
logger = logging.getLogger('revisionable')


class RelationDescriptor(namedtuple('RelationDescriptor', 'name related_type')):
    '''A relation found on a subject type.

    `name` is the relation name it was found under and `related_type` the
    model it points to (None if that type is not registered).
    '''
    __slots__ = ()


class ModelRegistry(object):

    def __init__(self):
        self._models = {}
        self._names = {}
        self._relations = {}

    def register(self, model, name=None, relations=None):
        '''Register `model` under `name` (defaults to the class name).

        @param relations: mapping of relation name to related model (or the
            related type's registered name). If None relations are
            discovered (lazily) through `discover_relations`.

        Returns the model so this can be used as a class decorator.
        '''
        name = name or model.__name__
        existing = self._models.get(name)
        if existing is not None and existing is not model:
            msg = 'Type name %r is already registered for %r' % (name, existing)
            raise ValueError(msg)
        # a model has one name, drop the old one when renamed
        old_name = self._names.get(model)
        if old_name is not None and old_name != name:
            del self._models[old_name]
            self._relations.pop(old_name, None)
        self._models[name] = model
        self._names[model] = name
        if relations is not None:
            self._relations[name] = dict(relations)
        else:
            self._relations.pop(name, None)
        logger.debug('Registered revisionable type %s: %s' % (name, model))
        return model

    def discover_relations(self, model):
        '''Relations of a model registered without explicit relations.'''
        return {}

    def model_for(self, type_name):
        return self._models.get(type_name)

    def type_name_of(self, model):
        return self._names.get(model, model.__name__)

    def __contains__(self, type_name):
        return type_name in self._models

    def _relations_of(self, type_name):
        if type_name not in self._relations:
            model = self.model_for(type_name)
            if model is None:
                return {}
            self._relations[type_name] = self.discover_relations(model)
        return self._relations[type_name]

    def relation_exists(self, type_name, relation_name):
        return relation_name in self._relations_of(type_name)

    def related_type_of(self, type_name, relation_name):
        '''Model that relation `relation_name` of `type_name` points to.

        None if there is no such relation or the related type was given by
        a name that is not registered.
        '''
        related = self._relations_of(type_name).get(relation_name)
        if isinstance(related, str):
            return self.model_for(related)
        return related

    def describe_relation(self, type_name, candidates):
        '''Look up the first of `candidates` that is a relation of `type_name`.

        @return RelationDescriptor or None.
        '''
        for relation_name in candidates:
            if self.relation_exists(type_name, relation_name):
                return RelationDescriptor(relation_name,
                        self.related_type_of(type_name, relation_name))
        return None
