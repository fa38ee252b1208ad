'''Resolve stored revision values into human readable ones.

Summary of the Algorithm
------------------------

For the old or new value of a revision:

  1. If the subject type is not registered return the raw value.
  2. If the key does not end with the id suffix it is a plain field: use
     the subject type's mutator for the key if it has one, otherwise the
     raw value.
  3. Otherwise find the relation named by the key minus the suffix
     (trying camel and snake case variants too) and load the related
     record by the stored id:
       * empty id -> the related type's null placeholder
       * missing record -> the related type's unknown placeholder
       * found -> the related record's identifiable name
  4. If any of step 3 is not possible (no such relation, related type not
     registered, related record has no identifiable name, a lookup raised)
     carry on as for a plain field (step 2).

Mutators are looked up on the subject type, no instance is built for them.
A mutator or format hook that raises gives the raw value.

Resolution never raises on bad data. Every result says which way it went
(`Resolution.outcome`) and, where the relation path was abandoned, why
(`Resolution.fallback`).
'''
from collections import namedtuple

from revisionable.base import RevisionableMixin
from revisionable.config import RevisionSettings
from revisionable.naming import is_related, relation_candidates, strip_suffix
from revisionable.revision import Revision

import logging
logger = logging.getLogger('revisionable')


class Outcome(object):
    UNRESOLVABLE_TYPE = 'unresolvable_type'
    PLAIN = 'plain'
    MUTATED = 'mutated'
    NULL_PLACEHOLDER = 'null_placeholder'
    UNKNOWN_PLACEHOLDER = 'unknown_placeholder'
    IDENTIFIED = 'identified'


class Fallback(object):
    RELATION_NOT_FOUND = 'relation_not_found'
    UNRESOLVABLE_RELATED_TYPE = 'unresolvable_related_type'
    NOT_IDENTIFIABLE = 'not_identifiable'
    # a registry, store or model hook raised while following the relation
    LOOKUP_FAILED = 'lookup_failed'
    # the mutator or format hook raised, the raw value is used
    FORMAT_FAILED = 'format_failed'


Resolution = namedtuple('Resolution', 'value outcome fallback',
        defaults=(None,))


class RecordStore(object):
    '''Loads records by model and (raw, stored) id.'''

    def find(self, model, record_id):
        '''Return the record or None if there is none.'''
        raise NotImplementedError()


def _is_empty(value):
    return value is None or value == ''


class RevisionResolver(object):

    def __init__(self, registry, store, settings=None):
        self.registry = registry
        self.store = store
        self.settings = settings or RevisionSettings()

    @property
    def id_suffix(self):
        return self.settings.id_suffix

    def old_value(self, revision):
        return self.resolve_value(revision, Revision.Which.OLD)

    def new_value(self, revision):
        return self.resolve_value(revision, Revision.Which.NEW)

    def resolve_value(self, revision, which=Revision.Which.NEW):
        return self.resolve(revision, which).value

    def resolve(self, revision, which=Revision.Which.NEW):
        '''Resolve the `which` ('old' or 'new') value of `revision`.

        @return Resolution.
        '''
        raw = revision.value(which)
        model = self.registry.model_for(revision.revisionable_type)
        if model is None:
            logger.debug('Type %s not registered, using raw value of %s' %
                    (revision.revisionable_type, revision))
            return Resolution(raw, Outcome.UNRESOLVABLE_TYPE)

        fallback = None
        if is_related(revision.key, self.id_suffix):
            try:
                result = self._resolve_related(model, revision, raw)
            except Exception as e:
                logger.debug('Looking up relation of %s failed: %r' %
                        (revision, e))
                result = Fallback.LOOKUP_FAILED
            if isinstance(result, Resolution):
                return result
            fallback = result
            logger.debug('Resolving %s as plain value: %s' %
                    (revision, fallback))
        return self._resolve_plain(model, revision, raw, fallback)

    def _resolve_plain(self, model, revision, raw, fallback=None):
        try:
            mutator = self._mutator_for(model, revision.key)
            if mutator is not None:
                value = self.format(model, revision.key, mutator(raw))
                return Resolution(value, Outcome.MUTATED, fallback)
            return Resolution(self.format(model, revision.key, raw),
                    Outcome.PLAIN, fallback)
        except Exception as e:
            logger.debug('Formatting %s failed, using raw value: %r' %
                    (revision, e))
            return Resolution(raw, Outcome.PLAIN, Fallback.FORMAT_FAILED)

    def _mutator_for(self, model, key):
        if issubclass(model, RevisionableMixin):
            return model.mutator_for(key)
        return None

    def _resolve_related(self, model, revision, raw):
        '''Resolve through the relation named by the key.

        Errors raised by the registry or the related record propagate to
        `resolve`, which treats the value as a plain one. A failing store
        lookup means the record cannot be had and gives the unknown
        placeholder.

        @return Resolution, or the Fallback reason if the value should be
            treated as a plain one.
        '''
        type_name = revision.revisionable_type
        candidates = relation_candidates(revision.key, self.id_suffix)
        relation = self.registry.describe_relation(type_name, candidates)
        if relation is None:
            return Fallback.RELATION_NOT_FOUND
        related = relation.related_type
        if related is None:
            return Fallback.UNRESOLVABLE_RELATED_TYPE

        if _is_empty(raw):
            return Resolution(self._null_string(related),
                    Outcome.NULL_PLACEHOLDER)

        fallback = None
        try:
            item = self.store.find(related, raw)
        except Exception as e:
            logger.debug('Finding %s %r failed: %r' % (related, raw, e))
            item = None
            fallback = Fallback.LOOKUP_FAILED
        if item is None:
            value = self.format(model, revision.key,
                    self._unknown_string(related))
            return Resolution(value, Outcome.UNKNOWN_PLACEHOLDER, fallback)

        if not isinstance(item, RevisionableMixin):
            return Fallback.NOT_IDENTIFIABLE
        key = revision.key
        mutator = item.mutator_for(key)
        if mutator is not None:
            key = mutator(key)
        value = self.format(model, key, item.identifiable_name())
        return Resolution(value, Outcome.IDENTIFIED)

    def _null_string(self, related):
        return getattr(related, 'revision_null_string',
                self.settings.null_string)

    def _unknown_string(self, related):
        return getattr(related, 'revision_unknown_string',
                self.settings.unknown_string)

    def format(self, model, key, value):
        '''Format `value` of field `key` the way the subject type wants.'''
        if issubclass(model, RevisionableMixin):
            return model.format_revision_value(key, value)
        return value

    def field_name(self, revision):
        return strip_suffix(revision.key, self.id_suffix)

    def history_of(self, revision):
        '''The record `revision` is part of the history of, or None.'''
        model = self.registry.model_for(revision.revisionable_type)
        if model is None:
            return None
        return self._find(model, revision.revisionable_id)

    def user_responsible(self, revision):
        '''User responsible for the change, or None if not known.'''
        if _is_empty(revision.user_id):
            return None
        user_model_name = self.settings.user_model_name()
        if user_model_name is None:
            return None
        user_model = self.registry.model_for(user_model_name)
        if user_model is None:
            logger.debug('User type %s not registered' % user_model_name)
            return None
        return self._find(user_model, revision.user_id)

    def _find(self, model, record_id):
        try:
            return self.store.find(model, record_id)
        except Exception as e:
            logger.debug('Finding %s %r failed: %r' % (model, record_id, e))
            return None
