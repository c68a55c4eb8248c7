"""Main menu: buttons, hover and keyboard selection, title, logo and animation."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pygame

TITLE_TEXT = "welcome to pixel prison"
FONT_FILE = "BrownieStencil-8O8MJ.ttf"
FONT_SIZE = 80
FONT_COLOR = (255, 255, 255)
BUTTON_NAMES = ("jouer", "option", "meilleur", "histoire", "quit")
BUTTON_SPACING = 200
TITLE_POS = (500, 10)
LOGO_POS = (1694, 20)
GIF_POS = (760, 165)
MAX_FRAMES = 100
FRAME_DELAY = 50


def collides_with_mouse(rect, mouse_pos) -> bool:
    """Return True when the mouse lies strictly inside the rectangle."""
    area = pygame.Rect(rect)
    x, y = mouse_pos
    return area.x < x < area.right and area.y < y < area.bottom


@dataclass
class Button:
    """A menu button with a normal and a highlighted image."""

    name: str
    image: pygame.Surface
    highlighted_image: pygame.Surface
    rect: pygame.Rect

    def image_for(self, highlighted: bool) -> pygame.Surface:
        return self.highlighted_image if highlighted else self.image


@dataclass
class Menu:
    """State of the main menu. Buttons are numbered from 1; 0 means none selected."""

    buttons: list[Button]
    background: pygame.Surface | None = None
    title: pygame.Surface | None = None
    title_pos: tuple[int, int] = TITLE_POS
    logo: pygame.Surface | None = None
    logo_pos: tuple[int, int] = LOGO_POS
    frames: list[pygame.Surface] = field(default_factory=list)
    gif_pos: tuple[int, int] = GIF_POS
    click_sound: Any = None
    music_path: Path | None = None
    selected: int = 0
    frame: int = 0
    frame_delay: int = FRAME_DELAY

    def draw(self, surface: pygame.Surface, mouse_pos) -> None:
        """Draw the whole menu and step the animation by one frame."""
        if self.background is not None:
            surface.blit(self.background, (0, 0))
        for number, button in enumerate(self.buttons, start=1):
            highlighted = collides_with_mouse(button.rect, mouse_pos) or self.selected == number
            surface.blit(button.image_for(highlighted), button.rect)
        if self.title is not None:
            surface.blit(self.title, self.title_pos)
        if self.logo is not None:
            surface.blit(self.logo, self.logo_pos)
        if self.frames:
            surface.blit(self.frames[self.frame], self.gif_pos)
        self.advance_frame()

    def update(self, mouse_pos) -> int:
        """Select the first button under the mouse, playing the click on change."""
        for number, button in enumerate(self.buttons, start=1):
            if collides_with_mouse(button.rect, mouse_pos):
                if self.selected != number:
                    self.selected = number
                    if self.click_sound is not None:
                        self.click_sound.play()
                return self.selected
        self.selected = 0
        return self.selected

    def select_next(self) -> int:
        self.selected += 1
        if self.selected > len(self.buttons):
            self.selected = 1
        return self.selected

    def select_previous(self) -> int:
        self.selected -= 1
        if self.selected < 1:
            self.selected = len(self.buttons)
        return self.selected

    def advance_frame(self) -> int:
        if self.frames:
            self.frame = (self.frame + 1) % len(self.frames)
        return self.frame


def _warn(message: str) -> None:
    print(message, file=sys.stderr)


def _load_image(path: Path) -> pygame.Surface:
    if not path.is_file():
        raise FileNotFoundError(f"cannot load image {path}")
    return pygame.image.load(str(path))


def _load_optional_image(path: Path) -> pygame.Surface | None:
    try:
        return _load_image(path)
    except (FileNotFoundError, pygame.error) as exc:
        _warn(f"error loading {path.name}: {exc}")
        return None


def _render_title(root: Path) -> pygame.Surface:
    pygame.font.init()
    font_path = root / FONT_FILE
    if font_path.is_file():
        font = pygame.font.Font(str(font_path), FONT_SIZE)
    else:
        _warn(f"font {font_path.name} not found, using the default font")
        font = pygame.font.Font(None, FONT_SIZE)
    return font.render(TITLE_TEXT, True, FONT_COLOR)


def _load_click_sound(path: Path):
    try:
        if not path.is_file():
            raise FileNotFoundError(f"cannot load sound {path}")
        return pygame.mixer.Sound(str(path))
    except (FileNotFoundError, pygame.error) as exc:
        _warn(f"failed to load sound: {exc}")
        return None


def _load_frames(gif_dir: Path) -> list[pygame.Surface]:
    frames = []
    for number in range(1, MAX_FRAMES + 1):
        path = gif_dir / f"image{number}.png"
        if not path.is_file():
            continue
        try:
            frames.append(pygame.image.load(str(path)))
        except pygame.error:
            continue
    return frames


def load_menu(asset_dir) -> Menu:
    """Load every menu asset from a directory and lay the buttons out."""
    root = Path(asset_dir)
    buttons = []
    for index, name in enumerate(BUTTON_NAMES):
        normal = _load_image(root / f"{name}0.png")
        highlighted = _load_image(root / f"{name}1.png")
        rect = pygame.Rect(0, index * BUTTON_SPACING, normal.get_width(), normal.get_height())
        buttons.append(Button(name, normal, highlighted, rect))
    return Menu(
        buttons=buttons,
        background=_load_optional_image(root / "background_principale1.png"),
        title=_render_title(root),
        logo=_load_optional_image(root / "logo.jpeg"),
        frames=_load_frames(root / "gif"),
        click_sound=_load_click_sound(root / "click.wav"),
        music_path=root / "game_start.mp3",
    )