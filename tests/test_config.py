import logging

import pytest

from firestore_decoder import (
    Config,
    DatabaseId,
    ExpFirestore,
    Firestore,
    LiteFirestore,
    ServerTimestampBehavior,
    setup_logging,
    writer_from_config,
)

ENV_KEYS = [
    "FIRESTORE_PROJECT_ID",
    "FIRESTORE_DATABASE",
    "FIRESTORE_FLAVOR",
    "FIRESTORE_SERVER_TIMESTAMPS",
    "LOG_LEVEL",
    "LOG_FILE",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for key in ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def package_logger():
    logger = logging.getLogger("firestore_decoder")
    yield logger
    for handler in logger.handlers[:]:
        handler.close()
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


def test_defaults():
    config = Config.from_env()
    assert config.project_id == ""
    assert config.database == "(default)"
    assert config.flavor == "classic"
    assert config.server_timestamps == "none"
    assert config.log_level == "INFO"
    assert config.log_file is None


def test_from_env(monkeypatch):
    monkeypatch.setenv("FIRESTORE_PROJECT_ID", "env-project")
    monkeypatch.setenv("FIRESTORE_DATABASE", "analytics")
    monkeypatch.setenv("FIRESTORE_FLAVOR", "lite")
    monkeypatch.setenv("FIRESTORE_SERVER_TIMESTAMPS", "estimate")
    config = Config.from_env()
    assert config.database_id() == DatabaseId(project_id="env-project", database="analytics")
    assert config.flavor == "lite"
    assert config.server_timestamps == "estimate"


def test_from_dict_and_to_dict():
    values = {
        "project_id": "p",
        "database": "d",
        "flavor": "exp",
        "server_timestamps": "previous",
        "log_level": "DEBUG",
        "log_file": None,
    }
    assert Config.from_dict(values).to_dict() == values


def test_from_yaml(tmp_path, monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "WARNING")
    config_file = tmp_path / "config.yaml"
    config_file.write_text(
        "database:\n"
        "  type: firestore\n"
        "  project_id: yaml-project\n"
        "  flavor: exp\n"
    )
    config = Config.from_yaml(str(config_file))
    assert config.project_id == "yaml-project"
    assert config.database == "(default)"
    assert config.flavor == "exp"
    assert config.log_level == "WARNING"


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Config.from_yaml(str(tmp_path / "absent.yaml"))


@pytest.mark.parametrize("overrides,message", [
    ({"project_id": ""}, "project_id"),
    ({"database": ""}, "database"),
    ({"flavor": "desktop"}, "Unknown flavor"),
    ({"server_timestamps": "latest"}, "latest"),
    ({"log_level": "LOUD"}, "Unknown log level"),
])
def test_validate_rejects_bad_config(overrides, message):
    config = Config(**{"project_id": "p", **overrides})
    with pytest.raises(ValueError, match=message):
        config.validate()


@pytest.mark.parametrize("flavor,context_type", [
    ("classic", Firestore),
    ("exp", ExpFirestore),
    ("lite", LiteFirestore),
])
def test_writer_from_config(flavor, context_type, package_logger):
    writer = writer_from_config(Config(project_id="p", flavor=flavor, server_timestamps="estimate"))
    assert type(writer.flavor.firestore) is context_type
    assert writer.flavor.database_id == DatabaseId(project_id="p")
    assert writer.default_behavior is ServerTimestampBehavior.ESTIMATE


def test_context_from_config():
    db = ExpFirestore.from_config(Config(project_id="p", database="d"))
    assert db.database_id == DatabaseId(project_id="p", database="d")
    assert not db.database_id.is_default_database
    assert str(db.database_id) == "p/d"


def test_setup_logging(tmp_path):
    log_file = tmp_path / "logs" / "decoder.log"
    logger = setup_logging("debug", str(log_file))
    try:
        assert logger.name == "firestore_decoder"
        assert logger.level == logging.DEBUG
        assert len(logger.handlers) == 2
        logger.debug("hello")
        for handler in logger.handlers:
            handler.flush()
        assert "hello" in log_file.read_text()

        again = setup_logging("INFO")
        assert len(again.handlers) == 1
    finally:
        for handler in logger.handlers[:]:
            handler.close()
            logger.removeHandler(handler)
        logger.setLevel(logging.NOTSET)


def test_writer_from_config_applies_log_level(package_logger):
    writer_from_config(Config(project_id="p", log_level="DEBUG"))
    assert package_logger.level == logging.DEBUG
    assert len(package_logger.handlers) == 1


def test_writer_from_config_writes_log_file(tmp_path, package_logger, reference):
    log_file = tmp_path / "decoder.log"
    writer = writer_from_config(Config(project_id="p", log_level="ERROR", log_file=str(log_file)))
    writer.decode(reference("coll/doc", project="elsewhere"))
    for handler in package_logger.handlers:
        handler.flush()
    assert "elsewhere/(default)" in log_file.read_text()


def test_writer_from_config_rejects_bad_log_level(package_logger):
    with pytest.raises(ValueError, match="Unknown log level"):
        writer_from_config(Config(project_id="p", log_level="chatty"))
    assert package_logger.level == logging.NOTSET


@pytest.mark.parametrize("content,message", [
    ("- project_id: p\n", "top level"),
    ("database:\n  - project_id\n", "'database' block"),
])
def test_from_yaml_rejects_non_mapping(tmp_path, content, message):
    config_file = tmp_path / "config.yaml"
    config_file.write_text(content)
    with pytest.raises(ValueError, match=message) as excinfo:
        Config.from_yaml(str(config_file))
    assert str(config_file) in str(excinfo.value)
