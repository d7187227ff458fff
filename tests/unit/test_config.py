import pytest

from document_lib.config import DocumentConfig, get_config, load_config, set_config
from document_lib.document import of
from document_lib.errors import ConfigError


@pytest.fixture
def restore_config():
    previous = get_config()
    yield
    set_config(previous)


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(tmp_path / 'absent.yml')
    assert cfg == DocumentConfig()
    assert cfg.id_field == '_id'
    assert cfg.log_level == 'WARNING'
    assert cfg.json_indent is None


def test_load_config_from_yaml(tmp_path):
    p = tmp_path / 'doc.yml'
    p.write_text('log_level: DEBUG\nid_field: uid\njson_indent: 2\n', encoding='utf-8')
    cfg = load_config(p)
    assert cfg.log_level == 'DEBUG'
    assert cfg.id_field == 'uid'
    assert cfg.json_indent == 2


def test_empty_file_gives_defaults(tmp_path):
    p = tmp_path / 'doc.yml'
    p.write_text('', encoding='utf-8')
    assert load_config(p) == DocumentConfig()


def test_invalid_values_raise_config_error(tmp_path):
    p = tmp_path / 'doc.yml'
    p.write_text('json_indent: lots\n', encoding='utf-8')
    with pytest.raises(ConfigError):
        load_config(p)


def test_non_mapping_raises_config_error(tmp_path):
    p = tmp_path / 'doc.yml'
    p.write_text('- a\n- b\n', encoding='utf-8')
    with pytest.raises(ConfigError):
        load_config(p)


def test_unparseable_yaml_raises_config_error(tmp_path):
    p = tmp_path / 'doc.yml'
    p.write_text('a: [1, 2\n', encoding='utf-8')
    with pytest.raises(ConfigError):
        load_config(p)


def test_id_field_follows_config(restore_config):
    set_config(DocumentConfig(id_field='uid'))
    doc = of(('uid', 'u-1'), ('_id', 'ignored'))
    assert doc.id == 'u-1'


def test_json_indent_follows_config(restore_config):
    set_config(DocumentConfig(json_indent=2))
    assert str(of(('a', 1))) == '{\n  "a": 1\n}'
