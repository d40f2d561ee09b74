import argparse
from typing import Callable, List, Optional, Any, Sequence
from collections import UserDict
from collections.abc import Mapping, MutableMapping
import os
import yaml

from locpairs import utils

_PREFIX_INHERIT = '_inherit' # if false then section replaces the included one instead of merging
_KEY_INCLUDE = '__include__' # base yaml file(s) loaded before the current one


def deep_update(d:MutableMapping, u:Mapping, create_map:Callable[[],MutableMapping])\
        ->MutableMapping:
    # d is current state, u is new state
    for k, v in u.items():
        if k == _PREFIX_INHERIT:
            continue
        if isinstance(v, Mapping):
            inherit = v.get(_PREFIX_INHERIT, True)

            # if k doesn't exist, is not a mapping or we shouldn't inherit, start fresh
            target = d.get(k, None)
            if not isinstance(target, MutableMapping) or not inherit:
                target = create_map()
                d[k] = target
            d[k] = deep_update(target, v, create_map)
        else:
            d[k] = v
    return d


def _coerce(original_val:Any, val:str)->Any:
    if isinstance(original_val, Mapping):
        raise TypeError('a whole section cannot be set from a single value')
    if original_val is None:
        return val # nothing to infer type from
    if isinstance(original_val, bool): # bool('False') is True :(
        return utils.str2bool(val)
    return type(original_val)(val)


class Config(UserDict):
    def __init__(self, config_filepath:Optional[str]=None,
                 default_config_filepath:Optional[str]=None,
                 config_content:Optional[Mapping]=None,
                 app_desc:Optional[str]=None,
                 use_args=True,
                 first_arg_filename=True,
                 param_args:Sequence=()) -> None:
        """Create config from yaml files and override values from args.

        Config is a hierarchical dictionary. Values in yaml can be overridden
        from command line using
            --parent.child 42
        A yaml file can specify `__include__: base.yaml` (or a list of files)
        which is loaded first so the including file overrides its values.
        Setting `_inherit: false` in a section replaces the included section
        instead of merging into it.

        Keyword Arguments:
            config_filepath -- yaml file to load, could be several files separated by ';' loaded in sequence
            default_config_filepath -- used when command line does not name a config file
            config_content -- applied over the yaml files but before args
            use_args -- if True then command line args override the config
            first_arg_filename -- if True then first non-option command line arg is the config file
            param_args -- ['--key1', val1, '--key2', val2, ...] applied before command line args
        """
        super(Config, self).__init__()

        self.args, self.extra_args = None, []

        if use_args:
            parser = argparse.ArgumentParser(description=app_desc)
            self.args, self.extra_args = parser.parse_known_args()

            if first_arg_filename and len(self.extra_args) > 0 and not self.extra_args[0].startswith('--'):
                config_filepath = self.extra_args.pop(0)

        if not config_filepath:
            config_filepath = default_config_filepath

        if config_filepath:
            for filepath in config_filepath.strip().split(';'):
                self._load_from_file(filepath.strip())
        if config_content is not None:
            deep_update(self, config_content, Config._child)

        self._update_from_args(param_args)
        self._update_from_args(self.extra_args)

        self.config_filepath = config_filepath

    @staticmethod
    def _child()->'Config':
        return Config(use_args=False)

    def _load_from_file(self, filepath:Optional[str])->None:
        # includes are loaded first so this file overrides them
        if filepath:
            filepath = utils.full_path(filepath)
            with open(filepath, 'r', encoding='utf-8') as f:
                config_yaml = yaml.safe_load(f) or {}
            self._process_includes(config_yaml, filepath)
            deep_update(self, config_yaml, Config._child)

    def _process_includes(self, config_yaml:Mapping, filepath:str):
        if _KEY_INCLUDE in config_yaml:
            includes = config_yaml[_KEY_INCLUDE]
            if isinstance(includes, str):
                includes = [includes]
            assert isinstance(includes, List), f"'{_KEY_INCLUDE}' value must be string or list"
            for include in includes:
                include_filepath = os.path.join(os.path.dirname(filepath), include)
                self._load_from_file(include_filepath)
            del config_yaml[_KEY_INCLUDE]

    def _update_from_args(self, args:Sequence)->None:
        i = 0
        while i < len(args)-1:
            arg = args[i]
            if arg.startswith('--'):
                path = arg[len('--'):].split('.')
                i += Config._update_section(self, path, args[i+1])
            else: # some other arg
                i += 1

    @staticmethod
    def _update_section(section:MutableMapping, path:List[str], val:str)->int:
        for sub_path in path[:-1]:
            if sub_path in section and isinstance(section[sub_path], MutableMapping):
                section = section[sub_path]
            else:
                return 1 # path not found, ignore this
        key = path[-1]

        if key in section:
            original_val = section[key]
            try:
                section[key] = _coerce(original_val, val)
            except (TypeError, ValueError) as e:
                raise KeyError(
                    f'The yaml key or command line argument "{key}" is likely not named correctly or value is of wrong data type. Error occured when setting it to value "{val}". '
                    f'Originally it is set to {original_val} which is of type {type(original_val)}. '
                    f'Original exception: {e}')
            return 2 # consumed key and value
        else:
            return 1 # path not found, ignore this

    def to_dict(self)->dict:
        return deep_update({}, self, lambda: dict()) # type: ignore
