'''Field key and name conventions shared by the resolver and the models.

A revision key denotes a foreign key when it ends with the id suffix (by
default 'Id', e.g. `categoryId`). The relation it points through is named
by the key with the suffix removed.
'''
import re

ID_SUFFIX = 'Id'


def camel_case(string):
    '''Underscored to lower camel case.

    e.g. "this_method_name" -> "thisMethodName"
    '''
    return re.sub(r'_(.?)', lambda m: m.group(1).upper(), string)


def snake_case(string):
    '''e.g. "thisMethodName" -> "this_method_name"'''
    return re.sub(r'(?<=[a-z0-9])([A-Z])', r'_\1', string).lower()


def is_related(key, suffix=ID_SUFFIX):
    '''Return True if `key` is for a related model.

    Only a suffix at the very end counts and there must be something in
    front of it: "statusId" is related, "Id" and "idea" are not.
    '''
    if not key or not suffix:
        return False
    return len(key) > len(suffix) and key.endswith(suffix)


def strip_suffix(key, suffix=ID_SUFFIX):
    if is_related(key, suffix):
        return key[:-len(suffix)]
    return key


def relation_candidates(key, suffix=ID_SUFFIX):
    '''Names to try, in order, when looking up the relation behind `key`.

    The plain name comes first, then camel and snake case variants for
    keys such as `published_statusId` whose relation is named
    `publishedStatus` or `published_status`.
    '''
    name = strip_suffix(key, suffix)
    out = []
    for candidate in (name, camel_case(name), snake_case(name)):
        if candidate and candidate not in out:
            out.append(candidate)
    return out


def mutator_name(key):
    '''Name of the method formatting values of field `key`.

    e.g. "status" -> "get_status_attribute",
    "publishedAt" -> "get_published_at_attribute"
    '''
    return 'get_%s_attribute' % snake_case(key)
