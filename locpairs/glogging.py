
import sys
from typing import Any, Mapping, Optional, Union
from functools import partial
import logging as py_logging
import os
import timeit
import json
import atexit

import psutil
from rich.console import Console
from rich.logging import RichHandler

from locpairs import utils


# when app exits, call shutdown to save everything in log system
_atexit_reg = False # is hook for atexit registered?
def install_atexit():
    global _atexit_reg
    if not _atexit_reg:
        atexit.register(on_app_exit)
        _atexit_reg = True
def on_app_exit():
    if _logger is not None:
        _logger.shutdown()

def _fmt(val:Any)->str:
    if isinstance(val, float):
        return f'{val:.4g}'
    return str(val)

def _dict2msg(d:Mapping[str,Any])->str:
    return ', '.join(f'{k}={_fmt(v)}' for k, v in d.items())

highlight_keywords = ['total_distance=', 'similarity_score=']

def create_py_logger(filepath:Optional[str]=None,
                    allow_overwrite_log:bool=False,
                    project_name:Optional[str]=None,
                    run_name:Optional[str]=None,
                    py_logger_name:Optional[str]='locpairs',
                    min_level=py_logging.INFO,
                    console_level=py_logging.INFO,
                    file_level=py_logging.INFO,
                    enable_console=True)->py_logging.Logger:

    logger = py_logging.getLogger(name=py_logger_name)

    # close current handlers
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)

    logger.setLevel(min_level)

    if enable_console:
        # stdout is kept for the results, log lines go to stderr
        ch = RichHandler(
            console = Console(stderr=True),
            level = console_level,
            show_time = True,
            show_level = False,
            log_time_format = '%H:%M',
            show_path = False,
            keywords = highlight_keywords,
        )
        logger.addHandler(ch)

    logger.propagate = False # otherwise root logger prints things again

    if filepath:
        utils.full_path(os.path.dirname(filepath), create=True) # ensure dir exists
        filepath = utils.full_path(filepath)

        if os.path.exists(filepath) and not allow_overwrite_log:
            raise FileExistsError(f'Log file {filepath} already exists. Specify different file or pass allow_overwrite_log=True.')

        fh = py_logging.FileHandler(filename=filepath, mode='w', encoding='utf-8')
        fh.setLevel(file_level)
        fh.setFormatter(py_logging.Formatter('[%(asctime)s][%(levelname)s] %(message)s'))
        logger.addHandler(fh)

    logger.debug(_dict2msg({'project_name': project_name, 'run_name': run_name, 'filepath': filepath}))

    return logger

def _uninit_logger(*args, **kwargs):
    raise RuntimeError('Logger not initialized. Create Logger() first.')

summary = _uninit_logger
info = _uninit_logger
warn = _uninit_logger
error = _uninit_logger
shutdown = _uninit_logger

_logger:Optional['Logger'] = None
_original_excepthook = None

def get_logger()->'Logger':
    if _logger is None:
        raise RuntimeError('Logger not initialized. Create Logger() first.')
    return _logger

def _bind_module_fns(logger:Optional['Logger'])->None:
    global summary, info, warn, error, shutdown
    if logger is None:
        summary = info = warn = error = shutdown = _uninit_logger
    else:
        summary = partial(Logger.summary, logger)
        info = partial(Logger.info, logger)
        warn = partial(Logger.warn, logger)
        error = partial(Logger.error, logger)
        shutdown = partial(Logger.shutdown, logger)

def _handle_except(logger:'Logger', exc_type, exc_value, exc_traceback):
    logger.error(utils.get_exception_str(exc_type, exc_value, exc_traceback), stack_info=False)
    if _original_excepthook is not None:
        _original_excepthook(exc_type, exc_value, exc_traceback)

class Logger:
    def __init__(self,
                 project_name:Optional[str]=None,
                 run_name:Optional[str]=None,
                 log_dir:Optional[str]=None,
                 log_filename:Optional[str]=None,
                 summaries_filename:Optional[str]=None,
                 allow_overwrite_log=False,
                 enable_console=True,
                 min_level=py_logging.INFO,
                 log_summaries=True,
                 save_on_exit:bool=True,
                 ) -> None:

        global _logger, _original_excepthook

        if _logger is not None:
            raise RuntimeError('Logger already initialized. Cannot create more than one logger.')

        self.has_shutdown = False
        self.start_time = timeit.default_timer()
        self.log_summaries = log_summaries
        self.log_filepath = None
        self.summaries_filepath = None
        self.summaries = {}

        if log_dir:
            log_dir = utils.full_path(str(log_dir), create=True)
            if log_filename:
                self.log_filepath = os.path.join(log_dir, log_filename)
            if summaries_filename:
                self.summaries_filepath = os.path.join(log_dir, summaries_filename)

        self._py_logger = create_py_logger(filepath=self.log_filepath,
                                           allow_overwrite_log=allow_overwrite_log,
                                           project_name=project_name,
                                           run_name=run_name,
                                           min_level=min_level,
                                           enable_console=enable_console)

        # register only after setup succeeded
        _logger = self
        _bind_module_fns(self)

        if save_on_exit:
            install_atexit()

        if _original_excepthook is None:
            _original_excepthook = sys.excepthook
        sys.excepthook = partial(_handle_except, self)

    def log_config(self, config:Mapping):
        if self.log_summaries:
            self._py_logger.info(_dict2msg({'project_config': dict(config)}))

    def info(self, d:Union[str, Mapping[str,Any]]):
        msg = _dict2msg(d) if isinstance(d, Mapping) else d
        self._py_logger.info(msg)

    def warn(self, d:Union[str, Mapping[str,Any]],
             exception_instance:Optional[BaseException]=None, stack_info:bool=False):
        if isinstance(d, Mapping):
            d = _dict2msg(d)
        self._py_logger.warning(d, exc_info=exception_instance, stack_info=stack_info)

    def error(self, d:Union[str, Mapping[str,Any]],
              exception_instance:Optional[BaseException]=None, stack_info:bool=True):
        if isinstance(d, Mapping):
            d = _dict2msg(d)
        self._py_logger.error(d, exc_info=exception_instance, stack_info=stack_info)

    def summary(self, d:Mapping[str,Any]):
        self.summaries.update(d)
        if self.log_summaries:
            self.info(d)

    def log_sys_info(self):
        self.summary({
                        'sys/python_version': f'{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}',
                        'sys/platform': sys.platform,
                        'sys/memory_gb': psutil.virtual_memory().available / (1024.0 ** 3),
                        'sys/cpu_count_logical': psutil.cpu_count(logical=True),
                        'sys/cpu_count_physical': psutil.cpu_count(logical=False),
                        'sys/free_disk_space_gb': utils.free_disk_space() / (1024.0 ** 3),
                        'sys/pid': os.getpid(),
                        })

    def shutdown(self, write_total_time:bool=True):
        if self.has_shutdown:
            return

        if write_total_time:
            self.summary({'run/log_filepath': self.log_filepath,
                          'run/elapsed_s': timeit.default_timer() - self.start_time})

        if self.summaries_filepath:
            with open(self.summaries_filepath, 'w', encoding='utf-8') as f:
                json.dump(self.summaries, f, indent=4)

        self.flush()
        self.has_shutdown = True

    def flush(self):
        for handler in self._py_logger.handlers:
            handler.flush()

    def close(self):
        """Shut down and release the process-wide slot so a new Logger can be created."""
        global _logger

        self.shutdown()
        for handler in self._py_logger.handlers[:]:
            handler.close()
            self._py_logger.removeHandler(handler)

        if _logger is self:
            _logger = None
            _bind_module_fns(None)
            sys.excepthook = _original_excepthook or sys.__excepthook__
