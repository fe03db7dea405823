"""
Tests for the application core: container, program modules, settings.
"""

from pathlib import Path

import pytest

from recordkeeper.core import Application, Config, Container, ProgramModule, Settings, load_settings


class Clock:
    pass


class Service:
    def __init__(self, clock: Clock):
        self.clock = clock


class Greeter:
    calls = 0

    def __init__(self, service: Service):
        self.service = service

    def __call__(self) -> int:
        Greeter.calls += 1
        return 3


class TestContainer:
    """Tests for Container."""

    def test_register_class_resolves_dependencies(self):
        container = Container()
        container.register_class(Clock)
        container.register_class(Service)
        service = container.resolve(Service)
        assert isinstance(service.clock, Clock)
        assert container.resolve(Service) is service

    def test_non_singleton_builds_new_instances(self):
        container = Container()
        container.register_class(Clock, singleton=False)
        assert container.resolve(Clock) is not container.resolve(Clock)

    def test_register_instance_and_string_key(self):
        container = Container()
        clock = Clock()
        container.register_instance("clock", clock)
        assert container.resolve("clock") is clock
        assert container.has("clock")

    def test_missing_registration(self):
        with pytest.raises(KeyError, match="No registration"):
            Container().resolve(Clock)


class TestApplication:
    """Tests for Application and ProgramModule."""

    def test_config_is_available_by_type_and_key(self, settings):
        app = Application(config=settings)
        assert app.container.resolve(Settings) is settings
        assert app.container.resolve("config") is settings

    def test_program_module_registers_and_runs(self):
        module = (
            ProgramModule("greet", "Say hello")
            .bind(Clock)
            .bind(Service)
            .entrypoint(Greeter)
        )
        app = Application().register(module)
        assert [(p.name, p.description) for p in app.programs] == [("greet", "Say hello")]
        before = Greeter.calls
        assert app.run("greet") == 3
        assert Greeter.calls == before + 1

    def test_function_entrypoint_returning_none_exits_zero(self):
        called = []
        app = Application().register(ProgramModule("fn").entrypoint(lambda: called.append(1)))
        assert app.run("fn") == 0
        assert called == [1]

    def test_interface_binding(self):
        class Base:
            pass

        class Impl(Base):
            pass

        app = Application().register(ProgramModule("x").bind(Base, Impl))
        assert isinstance(app.container.resolve(Base), Impl)
        assert app.programs == []

    def test_unknown_program(self):
        with pytest.raises(KeyError):
            Application().run("nope")

    def test_duplicate_program_name(self):
        app = Application().register(ProgramModule("a").entrypoint(lambda: 0))
        with pytest.raises(ValueError, match="already registered"):
            app.register(ProgramModule("a").entrypoint(lambda: 0))


class TestSettings:
    """Tests for Config and Settings."""

    def test_load_from_env_uses_prefix(self, monkeypatch):
        monkeypatch.setenv("RECORDKEEPER_LOG_LEVEL", "DEBUG")
        values = Config.load_from_env(students_file="x.txt")
        assert values["log_level"] == "DEBUG"
        assert values["students_file"] == "x.txt"

    def test_load_settings_ignores_unknown_keys(self, monkeypatch, tmp_path):
        monkeypatch.setenv("RECORDKEEPER_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("RECORDKEEPER_SOMETHING_ELSE", "1")
        settings = load_settings()
        assert settings.data_dir == tmp_path
        assert settings.students_path == tmp_path / "students.txt"

    def test_defaults(self):
        settings = Settings()
        assert settings.data_dir == Path(".")
        assert settings.inventory_path.name == "inventory_log.json"
        assert settings.report_path.name == "summary_report.txt"
        assert settings.error_log_path.name == "error_log.txt"
