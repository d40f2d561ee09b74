from typing import Callable, Optional
import os
import importlib
import traceback

import psutil


def full_path(path:str, create=False)->str:
    assert path
    path = os.path.realpath(
            os.path.expanduser(
                os.path.expandvars(path)))
    if create:
        os.makedirs(path, exist_ok=True)
    return path

def import_fn(spec:str)->Callable:
    """Import a function from a module. The spec is in the form of module.submodule.function"""
    module_name, fn_name = spec.rsplit('.', 1)
    module = importlib.import_module(module_name)
    fn = getattr(module, fn_name)
    return fn

def get_exception_str(exc_type, exc_value, exc_traceback)->str:
    return ''.join(traceback.format_exception(exc_type, exc_value, exc_traceback))

def free_disk_space(path:Optional[str]=None)->int:
    """Returns free disk space in bytes"""
    return psutil.disk_usage(path or os.path.abspath(os.sep)).free

def str2bool(val:str)->bool:
    # replacement for distutils.util.strtobool which is gone in Python 3.12
    v = val.strip().lower()
    if v in ('y', 'yes', 't', 'true', 'on', '1'):
        return True
    if v in ('n', 'no', 'f', 'false', 'off', '0'):
        return False
    raise ValueError(f'invalid truth value {val!r}')
