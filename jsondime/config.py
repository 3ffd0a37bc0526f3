
import os

from jupyter_core.paths import jupyter_config_path

from traitlets import Unicode, Enum, Bool, HasTraits, List
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound

from .merging.strategies import merge_strategies
from .transforms import key_cases


class JsondimeConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    path = jupyter_config_path()
    path.insert(0, os.getcwd())
    for c in _load_config_files('jsondime_config', path=path):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, JsondimeConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(JsondimeConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class _Comparison(JsondimeConfigurable):

    ignore_case = Bool(
        False,
        help="compare strings without regard to case.",
    ).tag(config=True)

    ignore_type = Bool(
        False,
        help="compare values of different types by their string forms.",
    ).tag(config=True)

    ignore_whitespace = Bool(
        False,
        help="collapse and strip whitespace in strings before comparing.",
    ).tag(config=True)

    ignore_keys = List(
        Unicode(),
        default_value=[],
        help="object keys to leave out of the comparison at every level.",
    ).tag(config=True)


class Diff(_Comparison):

    show_unchanged = Bool(
        False,
        help="include unchanged values in the printed diff.",
    ).tag(config=True)


class Merge(JsondimeConfigurable):

    merge_strategy = Enum(
        merge_strategies,
        'smart-merge',
        help="Specify the merge strategy to use.",
    ).tag(config=True)


class Show(JsondimeConfigurable):

    sort_keys = Bool(
        False,
        help="sort object keys recursively.",
    ).tag(config=True)

    key_case = Enum(
        key_cases,
        None,
        allow_none=True,
        help="convert object keys to the given case.",
    ).tag(config=True)


class JsonDiff(Global, Diff):
    pass

class JsonMerge(Global, Merge):
    pass

class JsonPatch(Global):
    pass

class JsonShow(Global, Show):
    pass


entrypoint_configurables = {
    'jsondime-diff': JsonDiff,
    'jsondime-merge': JsonMerge,
    'jsondime-patch': JsonPatch,
    'jsondime-show': JsonShow,
}
