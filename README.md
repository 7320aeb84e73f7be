# minilab

Four small, self-contained programs in one package:

- **engine3d** – a pseudo-3D scene of coloured balls that fall under gravity,
  bounce on a ground plane and are drawn with a simple perspective projection.
  A new ball of random size, depth and colour appears every two seconds.
- **physics** – a 2D sandbox of circular bodies falling under gravity, bouncing
  off the floor with damping and reversing direction when they touch.
- **kvstore** – an interactive, thread-safe key-value store that persists to a
  text file.
- **webserver** – a minimal threaded HTTP server that answers every request with
  one HTML document.

## Installation

```
pip install .
```

The two graphical programs need `pygame`, which is installed as a dependency.

## Commands

### 3D scene

```
minilab-engine3d
```

Opens an 800×600 window. Keys held down change the camera:

| Key | Action                               |
|-----|--------------------------------------|
| W   | decrease the vertical offset (up)    |
| S   | increase the vertical offset (down)  |
| A   | decrease the horizontal offset (left)|
| D   | increase the horizontal offset (right)|
| Q   | increase zoom (objects grow)         |
| E   | decrease zoom (objects shrink)       |

Offsets move at 200 units per second, zoom at 100 per second. Close the window
to quit.

### Physics sandbox

```
minilab-physics
```

Opens an 800×600 window with ten unit-mass bodies of random radius (10–29)
dropped near the top, under a downward gravity of 98. The simulation advances
in fixed steps of 0.01 s; bodies that reach the floor at y = 580 are pushed back
above it and bounce with damping 0.7. Close the window to quit.

### Key-value store

```
minilab-kv [--file PATH]
```

Loads the store file (default `store.txt` in the current directory) if it
exists, then accepts one command per line:

```
PUT <key> <value with spaces>
GET <key>
DEL <key>
LIST
EXIT
```

`GET` of a missing key prints `Key not found.`; any other command prints
`Unknown command.`. `EXIT` (or end of input) writes everything back to the store
file. In the file each key sits on its own line, followed by its value on the
next.

### Web server

```
minilab-web [--port PORT] [--document PATH]
```

Listens on port 8080 by default and answers every request with the contents of
`www/index.html` (relative to the current directory), or a `404 Not Found` page
if that file cannot be read. The file is read afresh for each request. Each
connection is handled on its own thread and closed after one response. Progress
is logged to standard error; stop the server with Ctrl+C.

The server does not parse the request: there is no routing, no other status
codes and no directory serving.

## Using the pieces from Python

```python
from minilab.physics.vector2d import Vector2D
from minilab.physics.body import Body
from minilab.physics.world import World

world = World(Vector2D(0.0, 98.0))
world.add_body(Body(1.0, 10.0, Vector2D(100.0, 50.0)))
world.step(0.01)
print(world.bodies[0].position)
```

`World.add_body` stores a copy of the body it is given. `minilab.physics.app`
also offers `make_bodies(count, rng)` and `bounce_off_ground(bodies, ground_y)`.

```python
from minilab.kvstore.store import KVStore

store = KVStore()
store.put("greeting", "hello world")
print(store.get("greeting"))   # raises KeyError for a missing key
store.delete("greeting")
store.save("store.txt")
store.load("store.txt")        # False if the file does not exist
```

`minilab.kvstore.cli.execute(store, line)` runs one shell command and returns a
`Reply` with the lines to print and whether the session is done.

```python
from minilab.engine3d.camera import Camera

camera = Camera()
print(camera.project_x(100.0, 300.0), camera.project_y(0.0, 300.0))
```

`minilab.engine3d.app.apply_controls(camera, pressed, dt)` applies the key
bindings above for a set of key names such as `{"w", "q"}`.

```python
from minilab.webserver.server import build_response, Server

response = build_response("www/index.html")
# Server(port=8080, document="www/index.html").start()
```

## Running the tests

```
pip install .[test]
pytest
```