import pytest

from phantomcore.config import BaseApplication, GfxConfiguration, RuntimeModule


class HeadlessApplication(BaseApplication):
    def __init__(self, config):
        super().__init__(config)
        self.windows = 0

    def create_main_window(self):
        self.windows += 1


def test_default_configuration():
    conf = GfxConfiguration()
    assert (conf.red_bits, conf.depth_bits, conf.stencil_bits) == (8, 24, 0)
    assert (conf.screen_width, conf.screen_height) == (1920, 1080)
    assert conf.app_name == "PhantomEngine"


def test_origin_size_follows_screen_size():
    conf = GfxConfiguration(8, 8, 8, 8, 24, 8, 0, 960, 540, "Game")
    assert conf.screen_origin_width == conf.screen_width == 960
    assert conf.screen_origin_height == conf.screen_height == 540


def test_configuration_text():
    conf = GfxConfiguration(8, 8, 8, 8, 24, 8, 0, 960, 540, "Game")
    lines = str(conf).splitlines()
    assert lines[0] == "App Name:Game"
    assert lines[1] == "GfxConfiguration: R:8 G:8 B:8 A:8 D:24 S:8 M:0 W:960 H:540"


def test_runtime_module_is_abstract():
    with pytest.raises(TypeError):
        RuntimeModule()


def test_base_application_requires_window():
    with pytest.raises(TypeError):
        BaseApplication(GfxConfiguration())


def test_init_prints_configuration(capsys):
    conf = GfxConfiguration(app_name="Demo")
    app = HeadlessApplication(conf)
    app.init()
    assert capsys.readouterr().out == str(conf)


def test_shutdown_sets_quit():
    app = HeadlessApplication(GfxConfiguration())
    assert app.is_quit() is False
    app.tick()
    assert app.is_quit() is False
    app.shutdown()
    assert app.is_quit() is True


def test_create_main_window_and_config():
    conf = GfxConfiguration()
    app = HeadlessApplication(conf)
    app.create_main_window()
    assert app.windows == 1
    assert app.config is conf