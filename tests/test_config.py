import pytest

from locpairs.config import Config

def _write(path, text):
    path.write_text(text, encoding='utf-8')
    return str(path)

@pytest.fixture
def config_files(tmp_path):
    _write(tmp_path / 'base.yaml', """
general:
  run_name: base
  repeat: 1
  verbose: false
data:
  input_path: base.txt
  extra: keep
logging:
  log_dir: null
""")
    main_file = _write(tmp_path / 'main.yaml', """
__include__: base.yaml
general:
  run_name: main
data:
  input_path: main.txt
""")
    return main_file


def test_include_and_override(config_files):
    config = Config(config_filepath=config_files, use_args=False)
    assert config['general']['run_name'] == 'main'
    assert config['general']['repeat'] == 1
    assert config['data']['input_path'] == 'main.txt'
    assert config['data']['extra'] == 'keep'
    assert '__include__' not in config


def test_param_args_coerce_types(config_files):
    config = Config(config_filepath=config_files, use_args=False,
                    param_args=['--general.repeat', '3',
                                '--general.verbose', 'true',
                                '--logging.log_dir', 'out/logs',
                                '--unknown.key', 'ignored'])
    assert config['general']['repeat'] == 3
    assert config['general']['verbose'] is True
    assert config['logging']['log_dir'] == 'out/logs'
    assert 'unknown' not in config


def test_bad_value_type(config_files):
    with pytest.raises(KeyError):
        Config(config_filepath=config_files, use_args=False,
               param_args=['--general.repeat', 'many'])


def test_inherit_false_replaces_section(tmp_path, config_files):
    child = _write(tmp_path / 'child.yaml', """
__include__: main.yaml
data:
  _inherit: false
  input_path: only.txt
""")
    config = Config(config_filepath=child, use_args=False)
    assert config['data'].to_dict() == {'input_path': 'only.txt'}
    assert config['general']['run_name'] == 'main'


def test_config_content_over_files(config_files):
    config = Config(config_filepath=config_files, use_args=False,
                    config_content={'data': {'input_path': 'content.txt'}})
    assert config['data']['input_path'] == 'content.txt'
    assert config.to_dict()['data'] == {'input_path': 'content.txt', 'extra': 'keep'}


def test_default_filepath_used(config_files):
    config = Config(default_config_filepath=config_files, use_args=False)
    assert config['general']['run_name'] == 'main'
    assert config.config_filepath == config_files


def test_whole_section_override_rejected(config_files):
    with pytest.raises(KeyError):
        Config(config_filepath=config_files, use_args=False,
               param_args=['--data', 'other.yaml'])
