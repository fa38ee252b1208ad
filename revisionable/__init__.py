'''
About
=====

revisionable keeps a field-level revision history for records in your data
layer. Every time a tracked record is updated one revision is stored per
changed field, holding the old value, the new value, the user responsible
and a timestamp.

Stored values are raw text, which is rarely what you want to show a
person. The package therefore also resolves revisions for display: a
changed foreign key such as `categoryId` is rendered as the identifiable
name of the category it points to, and per-field mutators defined on your
models can format plain values.

At present the package is provided as an extension to SQLAlchemy.


Authors
=======

The revisionable developers.


Overview
========

There are three pieces:

  * The 'revision': a flat record of one field change (see
    `revisionable.revision`). Revisions are written once and never
    changed.
  * The 'resolver': turns a revision's old or new value into something
    human readable (see `revisionable.resolver`). Resolution is best
    effort: whatever happens it renders *something* and never raises on
    bad data, since revision history is usually shown on pages that must
    not break.
  * The 'registry': explicit registration of the types revisions refer to
    and of the relations between them (see `revisionable.registry`).

To give a flavour of all of this here is a pseudo-code example::

    repo = Repository(metadata, Session, mapper_registry.map_imperatively)
    repo.make_revisionable(Post)
    repo.register(Category)
    repo.register(User)
    repo.rebuild_db()

    repo.set_user(user.id)
    post.categoryId = books.id
    repo.commit()

    rev = repo.history(post)[0]
    rev.field_name()                  # 'category'
    repo.resolver.old_value(rev)      # 'nothing'
    repo.resolver.new_value(rev)      # 'Books'
    repo.resolver.user_responsible(rev)  # <User ...>


Code in Action
--------------

To see some real code in action take a look at::

    revisionable/test/demo.py
    revisionable/test/test_resolver.py
'''
__version__ = '0.1a'
__description__ = 'Field-level revision history for SQLAlchemy models.'
