# pixelprison

The main menu of the Pixel Prison game, built on pygame. It opens a
1920x1080 window and shows a background, the title "welcome to pixel
prison", a logo, an animated picture and five buttons: play, options,
best scores, story and quit. Background music loops while it runs. A
click sound plays whenever the mouse moves onto a different button.

## Installing

```
pip install .
```

## Running

```
pixelprison
pixelprison --assets path/to/assets
```

`--assets` names the directory the menu loads from (default: `assets`).
It holds:

- `jouer0.png`/`jouer1.png`, `option0.png`/`option1.png`,
  `meilleur0.png`/`meilleur1.png`, `histoire0.png`/`histoire1.png`,
  `quit0.png`/`quit1.png`: the normal and highlighted image of each
  button. These are required; a missing one raises `FileNotFoundError`.
  The buttons are stacked at the left edge, 200 pixels apart.
- `background_principale1.png` and `logo.jpeg`: optional; a warning is
  printed if they cannot be loaded.
- `BrownieStencil-8O8MJ.ttf`: the title font; pygame's default font is
  used when it is missing.
- `click.wav` (hover sound) and `game_start.mp3` (music): optional.
- `gif/image1.png` to `gif/image100.png`: the frames of the animation.
  Missing numbers are skipped. One frame is shown every 50 ms.

If audio cannot be opened, the menu runs silently. If the window cannot
be created, the command exits with status 1.

## Controls

On the main menu:

- Up / Down arrows: move the selection between the five buttons. The
  selection wraps around at both ends.
- Mouse: hovering over a button selects it; moving off all buttons
  clears the selection.
- Clicking while play, options, best scores or story is selected opens
  that screen. Left-clicking while quit is selected closes the game.
- Enter while play is selected, or `j`: open the play screen.
- `o`: options screen. `m`: best scores screen. `h`: story screen.
- `q`: quit.

On the play screen, Escape returns to the main menu. Closing the window
quits from any screen.

## What it does not do

This package is only the main menu. There is no game behind it: the
play screen is a black window, and the options, best scores and story
screens have no content of their own and no key that leads back to the
menu; only closing the window leaves them. Nothing is saved between runs.

## Using it as a library

- `pixelprison.menu.load_menu(asset_dir)` builds a `Menu` from an asset
  directory.
- `Menu.update(mouse_pos)` selects the first button under the mouse
  (buttons are numbered 1 to 5, 0 means none) and returns the selection.
- `Menu.select_next()` and `Menu.select_previous()` move the selection
  with wrap-around.
- `Menu.draw(surface, mouse_pos)` renders a frame and advances the
  animation; `Menu.advance_frame()` advances it alone.
- `pixelprison.menu.collides_with_mouse(rect, mouse_pos)` tells whether a
  point lies strictly inside a rectangle.
- `pixelprison.app.App(menu, window)` holds the current `Screen`.
  `App.handle_event(event)` sends one pygame event to it, and `App.run()`
  runs the main loop until the player quits.
- `pixelprison.app.main(argv)` is the command's entry point.

## Tests

```
pip install .[test]
pytest
```