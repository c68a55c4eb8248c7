"""Game window, screen switching and the main loop."""

from __future__ import annotations

import argparse
import enum
import sys

import pygame

from pixelprison.menu import Menu, load_menu

WINDOW_SIZE = (1920, 1080)
QUIT_CHOICE = 5


class Screen(enum.IntEnum):
    MAIN_MENU = 0
    PLAY = 1
    OPTIONS = 2
    BEST_SCORES = 3
    STORY = 4


_MENU_SHORTCUTS = {
    pygame.K_j: Screen.PLAY,
    pygame.K_o: Screen.OPTIONS,
    pygame.K_m: Screen.BEST_SCORES,
    pygame.K_h: Screen.STORY,
}


class App:
    """Runs the menu and its sub-screens until the player quits."""

    def __init__(self, menu: Menu, window: pygame.Surface | None = None):
        self.menu = menu
        self.window = window
        self.screen = Screen.MAIN_MENU
        self.running = True

    def handle_event(self, event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif self.screen is Screen.MAIN_MENU:
            self._handle_menu_event(event)
        elif self.screen is Screen.PLAY:
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.screen = Screen.MAIN_MENU

    def _handle_menu_event(self, event) -> None:
        selected = self.menu.selected
        if event.type == pygame.MOUSEBUTTONDOWN:
            if event.button == pygame.BUTTON_LEFT and selected == QUIT_CHOICE:
                self.running = False
            if Screen.PLAY <= selected <= Screen.STORY:
                self.screen = Screen(selected)
        elif event.type == pygame.KEYDOWN:
            key = event.key
            if key == pygame.K_DOWN:
                self.menu.select_next()
            elif key == pygame.K_UP:
                self.menu.select_previous()
            if key == pygame.K_RETURN and self.menu.selected == Screen.PLAY:
                self.screen = Screen.PLAY
            elif key in _MENU_SHORTCUTS:
                self.screen = _MENU_SHORTCUTS[key]
            elif key == pygame.K_q:
                self.running = False

    def _pump_events(self) -> None:
        for event in pygame.event.get():
            self.handle_event(event)

    def run(self) -> None:
        while self.running:
            if self.screen is Screen.MAIN_MENU:
                self.menu.draw(self.window, pygame.mouse.get_pos())
                pygame.time.delay(self.menu.frame_delay)
                pygame.display.flip()
                self._pump_events()
                self.menu.update(pygame.mouse.get_pos())
            else:
                if self.screen is Screen.PLAY:
                    self.window.fill((0, 0, 0))
                    pygame.display.flip()
                self._pump_events()


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog="pixelprison", description="Pixel Prison main menu.")
    parser.add_argument("--assets", default="assets", help="directory holding the menu assets")
    args = parser.parse_args(argv)

    pygame.init()
    try:
        pygame.mixer.init(frequency=44100, size=-16, channels=2, buffer=1024)
    except pygame.error as exc:
        print(f"audio unavailable: {exc}", file=sys.stderr)
    try:
        window = pygame.display.set_mode(
            WINDOW_SIZE, pygame.HWSURFACE | pygame.RESIZABLE | pygame.DOUBLEBUF
        )
    except pygame.error as exc:
        print(f"cannot create window: {exc}", file=sys.stderr)
        pygame.quit()
        return 1
    try:
        menu = load_menu(args.assets)
        if pygame.mixer.get_init() and menu.music_path is not None and menu.music_path.is_file():
            pygame.mixer.music.load(str(menu.music_path))
            pygame.mixer.music.play(-1)
        App(menu, window).run()
    finally:
        pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())