# geometria

A small toolkit of building blocks for graphics applications:

- `geometria.easings`: easing curves (`quad_in`, `quad_out`, `quad_in_out`,
  `cubic_out`, `cubic_in_out`, `quart_in`, `quart_out`, `quart_in_out`,
  `circ_in`, `circ_out`, `circ_in_out`, `elastic_out`, `bounce_out`). Each
  takes the elapsed time `t`, start value `b`, change `c` and duration `d`.
  `compute(easing, t, d)` evaluates one curve, picked by the `Easing` enum,
  over the range 0..1.
- `geometria.math2d`: an immutable 2D `Vector`, a `Rotation`, and helpers for
  lines, segments and circles centred at the origin: `line_intersects_line`,
  `line_intersects_circle`, `segment_intersects_segment`,
  `segment_intersects_ray`, `segment_intersects_line`,
  `segment_intersects_circle`, `circle_contains_polygon`,
  `circle_intersects_rectangle` (axis-aligned or rotated) and `merge_points`.
- `geometria.plane`: a 3D `Plane` built from three points, with
  `signed_distance`, `project` and `intersect`. A plane is false when the
  three points are collinear.
- `geometria.frustum`: a camera `Frustum` that holds view and projection
  matrices (numpy arrays). It computes the combined matrix, its inverse, the
  normal matrix, the eight corners and the six clipping planes when they are
  first asked for. `FrustumListener` observers hear when the view-projection
  matrix is recomputed.
- `geometria.event`: an `Event` that takes callbacks. Each `attach` returns a
  `Listener`. The callback stays attached while the listener is alive and
  until `detach()` is called, and a listener also works as a context manager.
  `Event.copy()` gives an event that shares the same callbacks.
- `geometria.weak` and `geometria.observable`: weak handles
  (`EnableWeakFromThis`, `Weak`) and an `Observable` base class. Subclasses
  call `self._notify(callback)` to reach every observer that still exists.
  Observers are held weakly, so keep your own reference to them.
- `geometria.context`: a `Context` that tells `ContextListener` observers
  about size changes. `ResizableContext(width, height).resize(w, h)` notifies
  them only when the size actually changes.
- `geometria.path`: `collapse(filename)` resolves `/../` segments as text.
  `get_executable_path()` returns the interpreter's directory on Windows and
  an empty string elsewhere.
- `geometria.texture_data`: `load_png(filename, has_alpha=True)` reads a PNG
  into a `TextureData` holding width, height and raw RGBA or RGB bytes. It
  raises `OSError` when the file is missing or is not a PNG.
- `geometria.debug`: `print_stacktrace()` prints the current call stack.

## Installation

```
pip install .
```

## Examples

Easing:

```python
from geometria.easings import Easing, compute

compute(Easing.QUAD_OUT, 0.5, 1.0)   # 0.75
```

2D geometry:

```python
import math
from geometria.math2d import Vector, circle_intersects_rectangle

result = circle_intersects_rectangle(1.0, Vector(2.0, 0.0), Vector(1.5, 10.0))
bool(result)      # True
result.points     # the two points where the circle crosses the rectangle's edge

Vector(1.0, 0.0).rotate(math.pi / 2)   # about Vector(0.0, 1.0)
```

Planes:

```python
from geometria.plane import Plane

plane = Plane((0, 0, 0), (1, 0, 0), (0, 1, 0))
plane.signed_distance((0, 100, 10))   # 10.0
plane.project((1, 2, 3))              # array([1., 2., 0.])
```

Events:

```python
from geometria.event import Event

clicked = Event()
listener = clicked.attach(lambda x, y: print("clicked at", x, y))
clicked(10, 20)
listener.detach()
clicked(10, 20)    # nothing happens
```

Observing a context:

```python
from geometria.context import ContextListener, ResizableContext

class Viewport(ContextListener):
    def on_resize(self, width, height):
        print("new size", width, height)

context = ResizableContext(800, 600)
viewport = Viewport()          # keep a reference; observers are held weakly
context.add_observer(viewport)
context.resize(1024, 768)      # prints "new size 1024 768"
```

Frustum:

```python
import math
from geometria.frustum import Frustum

frustum = Frustum()
frustum.view_set_identity()
frustum.view_translate(0.0, 0.0, -5.0)
frustum.proj_set_perspective(math.radians(45.0), 16 / 9, 0.1, 10.0)
frustum.corner(0)    # near bottom-left corner in world space
frustum.plane(0)     # left clipping plane
```

## What it does not do

geometria does no drawing. It has no windows, GPU buffers, shaders, textures
on the GPU or render loop. `Frustum` and `Context` only compute and report
values that a renderer would use. It also has no logging, random-number or
general file-loading helpers. The only file it reads is a PNG, through
`load_png`.

## Running the tests

```
pip install .[test]
pytest
```