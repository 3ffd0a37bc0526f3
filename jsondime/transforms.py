# coding: utf-8

# Copyright (c) Jupyter Development Team.
# Distributed under the terms of the Modified BSD License.

"""Normalizing transformations applied to documents before comparing them."""

import re


def sort_object_keys(obj, recursive=True):
    "Return a copy of obj with object keys in sorted order."
    if isinstance(obj, dict):
        return {k: sort_object_keys(obj[k], recursive) if recursive else obj[k]
                for k in sorted(obj)}
    elif isinstance(obj, list):
        return [sort_object_keys(v, recursive) for v in obj] if recursive else obj
    else:
        return obj


def _is_empty(value, remove_null, remove_empty_string,
              remove_empty_object, remove_empty_array):
    if value is None:
        return remove_null
    if isinstance(value, str):
        return remove_empty_string and value == ""
    if isinstance(value, dict):
        return remove_empty_object and not value
    if isinstance(value, list):
        return remove_empty_array and not value
    return False


def remove_empty_values(obj, remove_null=False, remove_empty_string=False,
                        remove_empty_object=False, remove_empty_array=False):
    """Return a copy of obj without the selected kinds of empty values.

    Children are cleaned before their parent is checked, so an object
    holding only empty values is itself removed when empty objects are.
    The root value is never removed.
    """
    flags = (remove_null, remove_empty_string,
             remove_empty_object, remove_empty_array)
    if isinstance(obj, dict):
        result = {}
        for k, v in obj.items():
            v = remove_empty_values(v, *flags)
            if not _is_empty(v, *flags):
                result[k] = v
        return result
    elif isinstance(obj, list):
        result = []
        for v in obj:
            v = remove_empty_values(v, *flags)
            if not _is_empty(v, *flags):
                result.append(v)
        return result
    else:
        return obj


key_cases = ("camel", "snake", "kebab")


def convert_case(name, case):
    "Convert a single key name to camelCase, snake_case or kebab-case."
    if case == "camel":
        name = re.sub(r"[-_](.)", lambda m: m.group(1).upper(), name)
        return name[:1].lower() + name[1:]
    elif case == "snake":
        name = re.sub(r"([A-Z])", r"_\1", name)
        name = re.sub(r"[-\s]", "_", name).lower()
        return re.sub(r"^_", "", name)
    elif case == "kebab":
        name = re.sub(r"([A-Z])", r"-\1", name)
        name = re.sub(r"[_\s]", "-", name).lower()
        return re.sub(r"^-", "", name)
    raise ValueError("Unknown key case %r, expected one of %r" % (case, key_cases))


def convert_key_case(obj, case, recursive=True):
    "Return a copy of obj with all object keys converted to the given case."
    if case not in key_cases:
        raise ValueError("Unknown key case %r, expected one of %r" % (case, key_cases))
    if isinstance(obj, dict):
        return {convert_case(k, case): convert_key_case(v, case, recursive) if recursive else v
                for k, v in obj.items()}
    elif isinstance(obj, list):
        return [convert_key_case(v, case, recursive) for v in obj] if recursive else obj
    else:
        return obj
