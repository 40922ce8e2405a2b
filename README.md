# crabbybird

A small side-scrolling arcade game. Your bird sits at the left of an
800 × 512 window. Pipes scroll in from the right, and you have to flap through
the gap between each upper and lower pipe.

## Installing

```
pip install .
```

The game uses `pygame` to open the window, draw and read input.

## Playing

```
crabbybird
```

- **Space** starts a round from the title screen ("Press Spacebar").
- **Space** or the **left mouse button** flaps. Each flap sets the bird's
  upward speed to 350 pixels per second, and gravity pulls it back down.
  Presses in the first two frames of a round are ignored, so the key that
  started the round does not also flap.
- Touching a pipe, the ground or the top of the screen ends the round and
  shows **Game Over**. The scenery stops and the bird freezes in place.
- **Space** on the Game Over screen clears the pipes and puts the bird back at
  its start, ready for the next round.

You score one point for each pipe gap you pass. The score is shown in the top
left corner.

The game speeds up as you play. Every ten seconds the scroll speed (150 pixels
per second at the start) rises by 5 %, up to three times the starting speed.
It drops back to the starting speed when a new round begins.

A new pipe pair appears every 2.2 seconds. Each gets a random gap between 120
and 220 pixels, placed at a random height kept clear of the ground and the
ceiling.

## Developer mode

```
crabbybird --dev
```

In this mode the backquote key (`` ` ``) toggles an overlay that outlines the
collision shapes in red and the scoring zones in yellow, and shows the frame
rate in the top right corner. Frame rate and frame time are also logged once
a second.

## Using the game logic directly

The rules run without a window. `crabbybird.game.Session` holds the world,
the score, the speed and the current `GameState`; call
`Session.update(dt, space, click)` once per frame with the frame length in
seconds and whether Space or the left mouse button was pressed.
`crabbybird.app.Renderer` draws a session onto any `pygame.Surface` of the
window's size.

## What it does not do

- There is no artwork, sound or music: the sky, hills, ground, pipes and bird
  are drawn as plain shapes.
- Scores are not saved; there is no high-score table.
- The window has a fixed size.

## Running the tests

```
pip install ".[test]"
pytest
```