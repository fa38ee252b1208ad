import pytest

from revisionable.base import RevisionableMixin
from revisionable.config import RevisionSettings
from revisionable.registry import ModelRegistry, RelationDescriptor
from revisionable.resolver import (Fallback, Outcome, RecordStore,
        RevisionResolver)
from revisionable.revision import Revision
from revisionable.sqlalchemy import MapperRegistry
from revisionable.test import demo


class Author(RevisionableMixin):
    def __init__(self, id=None, name=None):
        self.id = id
        self.name = name

    def identifiable_name(self):
        return self.name


class Book(RevisionableMixin):
    pass


class Note(RevisionableMixin):
    def __init__(self, body):
        self.body = body


class Broken(RevisionableMixin):
    def identifiable_name(self):
        raise AttributeError('name')

    @classmethod
    def get_body_attribute(cls, value):
        return value.upper()


class FailingStore(RecordStore):
    def find(self, model, record_id):
        raise OverflowError('id too large')


class DictStore(RecordStore):
    def __init__(self, records):
        self.records = records

    def find(self, model, record_id):
        return self.records.get((model, str(record_id)))


class TestModelRegistry:
    def setup_method(self, method):
        self.registry = ModelRegistry()
        self.registry.register(Author)
        self.registry.register(Book, relations={
            'author': Author,
            'publisher': 'Publisher',
            })

    def test_register(self):
        assert 'Book' in self.registry
        assert 'Publisher' not in self.registry
        assert self.registry.model_for('Book') is Book
        assert self.registry.model_for('Publisher') is None
        assert self.registry.type_name_of(Book) == 'Book'

    def test_register_under_name(self):
        self.registry.register(Book, name='app.models.Book')
        assert self.registry.model_for('app.models.Book') is Book
        assert self.registry.type_name_of(Book) == 'app.models.Book'
        assert self.registry.model_for('Book') is None
        assert 'Book' not in self.registry

    def test_register_name_taken(self):
        with pytest.raises(ValueError):
            self.registry.register(Author, name='Book')

    def test_register_decorator(self):
        @self.registry.register
        class Publisher(RevisionableMixin):
            pass
        assert self.registry.model_for('Publisher') is Publisher
        assert self.registry.related_type_of('Book', 'publisher') is Publisher

    def test_relations(self):
        assert self.registry.relation_exists('Book', 'author')
        assert not self.registry.relation_exists('Book', 'editor')
        assert not self.registry.relation_exists('Gone', 'author')
        assert self.registry.related_type_of('Book', 'author') is Author
        assert self.registry.related_type_of('Book', 'publisher') is None

    def test_describe_relation(self):
        out = self.registry.describe_relation('Book', ['writer', 'author'])
        assert out == RelationDescriptor('author', Author)
        assert self.registry.describe_relation('Book', ['writer']) is None


class TestResolverWithoutDatabase:
    def setup_method(self, method):
        registry = ModelRegistry()
        registry.register(Author)
        registry.register(Book, relations={
            'author': Author,
            'publisher': 'Publisher',
            })
        store = DictStore({(Author, '7'): Author(7, 'tolstoy')})
        self.resolver = RevisionResolver(registry, store)

    def test_identified(self):
        rev = Revision('Book', 1, 'authorId', None, '7')
        assert self.resolver.new_value(rev) == 'tolstoy'
        assert self.resolver.old_value(rev) == 'nothing'

    def test_related_type_not_registered(self):
        rev = Revision('Book', 1, 'publisherId', None, '3')
        out = self.resolver.resolve(rev, 'new')
        assert out == ('3', Outcome.PLAIN, Fallback.UNRESOLVABLE_RELATED_TYPE)

    def test_configured_suffix(self):
        resolver = RevisionResolver(self.resolver.registry,
                self.resolver.store, RevisionSettings(id_suffix='_id'))
        rev = Revision('Book', 1, 'author_id', None, '7')
        assert resolver.new_value(rev) == 'tolstoy'
        assert resolver.field_name(rev) == 'author'

    def test_suffix_only_at_end(self):
        rev = Revision('Book', 1, 'authorIdentity', None, '7')
        out = self.resolver.resolve(rev, 'new')
        assert out.value == '7'
        assert out.fallback is None

    def test_subject_needs_constructor_arguments(self):
        self.resolver.registry.register(Note)
        rev = Revision('Note', 1, 'body', 'a', 'b')
        out = self.resolver.resolve(rev, 'new')
        assert out == ('b', Outcome.PLAIN, None)

    def test_mutator_raises(self):
        self.resolver.registry.register(Broken)
        rev = Revision('Broken', 1, 'body', None, 'b')
        out = self.resolver.resolve(rev, 'old')
        assert out == (None, Outcome.PLAIN, Fallback.FORMAT_FAILED)
        assert self.resolver.new_value(rev) == 'B'

    def test_identifiable_name_raises(self):
        registry = self.resolver.registry
        registry.register(Broken)
        registry.register(Note, relations={'broken': Broken})
        store = DictStore({(Broken, '2'): Broken()})
        resolver = RevisionResolver(registry, store)
        rev = Revision('Note', 1, 'brokenId', None, '2')
        out = resolver.resolve(rev, 'new')
        assert out == ('2', Outcome.PLAIN, Fallback.LOOKUP_FAILED)

    def test_store_raises(self):
        resolver = RevisionResolver(self.resolver.registry, FailingStore())
        rev = Revision('Book', 1, 'authorId', None, '7')
        out = resolver.resolve(rev, 'new')
        assert out == ('unknown', Outcome.UNKNOWN_PLACEHOLDER,
                Fallback.LOOKUP_FAILED)
        assert resolver.old_value(rev) == 'nothing'
        assert resolver.history_of(rev) is None


class TestMapperRegistry:
    def setup_method(self, method):
        self.registry = MapperRegistry()
        self.registry.register(demo.Post)
        self.registry.register(demo.Category)

    def test_scalar_relations_discovered(self):
        assert self.registry.relation_exists('Post', 'category')
        assert self.registry.relation_exists('Post', 'publishedStatus')
        assert self.registry.related_type_of('Post', 'category') is \
            demo.Category
        assert not self.registry.relation_exists('Post', 'editor')

    def test_unmapped_model(self):
        self.registry.register(Author)
        assert not self.registry.relation_exists('Author', 'books')
