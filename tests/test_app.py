import pygame
import pytest

from pixelprison.app import App, Screen
from pixelprison.menu import BUTTON_NAMES, BUTTON_SPACING, Button, Menu


def _make_menu():
    buttons = [
        Button(
            name,
            pygame.Surface((100, 50)),
            pygame.Surface((100, 50)),
            pygame.Rect(0, index * BUTTON_SPACING, 100, 50),
        )
        for index, name in enumerate(BUTTON_NAMES)
    ]
    return Menu(buttons=buttons)


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def _click(button=pygame.BUTTON_LEFT):
    return pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=button, pos=(0, 0))


@pytest.fixture
def app():
    return App(_make_menu())


def test_down_and_up_move_selection(app):
    app.handle_event(_key(pygame.K_DOWN))
    assert app.menu.selected == 1
    app.handle_event(_key(pygame.K_UP))
    assert app.menu.selected == len(BUTTON_NAMES)
    assert app.screen is Screen.MAIN_MENU


@pytest.mark.parametrize(
    "key, screen",
    [
        (pygame.K_j, Screen.PLAY),
        (pygame.K_o, Screen.OPTIONS),
        (pygame.K_m, Screen.BEST_SCORES),
        (pygame.K_h, Screen.STORY),
    ],
)
def test_shortcut_keys_open_screens(app, key, screen):
    app.handle_event(_key(key))
    assert app.screen is screen
    assert app.running is True


def test_return_opens_play_only_when_play_selected(app):
    app.menu.selected = 2
    app.handle_event(_key(pygame.K_RETURN))
    assert app.screen is Screen.MAIN_MENU
    app.menu.selected = 1
    app.handle_event(_key(pygame.K_RETURN))
    assert app.screen is Screen.PLAY


def test_q_quits(app):
    app.handle_event(_key(pygame.K_q))
    assert app.running is False


def test_left_click_on_quit_button_quits(app):
    app.menu.selected = len(BUTTON_NAMES)
    app.handle_event(_click())
    assert app.running is False


def test_right_click_on_quit_button_keeps_running(app):
    app.menu.selected = len(BUTTON_NAMES)
    app.handle_event(_click(pygame.BUTTON_RIGHT))
    assert app.running is True


@pytest.mark.parametrize("button", [pygame.BUTTON_LEFT, pygame.BUTTON_RIGHT])
def test_click_opens_selected_screen(app, button):
    app.menu.selected = 3
    app.handle_event(_click(button))
    assert app.screen is Screen.BEST_SCORES


def test_click_with_nothing_selected_stays(app):
    app.handle_event(_click())
    assert app.screen is Screen.MAIN_MENU
    assert app.running is True


def test_escape_leaves_play_screen(app):
    app.screen = Screen.PLAY
    app.handle_event(_key(pygame.K_ESCAPE))
    assert app.screen is Screen.MAIN_MENU


def test_escape_ignored_on_options_screen(app):
    app.screen = Screen.OPTIONS
    app.handle_event(_key(pygame.K_ESCAPE))
    assert app.screen is Screen.OPTIONS


@pytest.mark.parametrize("screen", list(Screen))
def test_quit_event_stops_on_every_screen(app, screen):
    app.screen = screen
    app.handle_event(pygame.event.Event(pygame.QUIT))
    assert app.running is False


def test_run_stops_on_quit_event(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    pygame.display.init()
    try:
        window = pygame.display.set_mode((200, 200))
        app = App(_make_menu(), window)
        app.screen = Screen.PLAY
        pygame.event.post(pygame.event.Event(pygame.QUIT))
        app.run()
        assert app.running is False
        assert tuple(window.get_at((10, 10)))[:3] == (0, 0, 0)
    finally:
        pygame.display.quit()