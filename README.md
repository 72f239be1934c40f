# fieldsim

Building blocks for working with a small-size robot soccer field: Voronoi
graph types and shortest-path search, a plain-data model of robots, the ball
and heat-map cells, UDP transport for vision packets, and helpers that check
and translate simulator control messages. It has no dependencies outside the
standard library.

## Modules

### `fieldsim.geometry`

- `VPoint(x, y, id=-1)` is a dataclass for a 2D point with an integer id.
- `VEdge(start, left, right)` is a Voronoi edge between the sites `left` and
  `right`. It starts at `start` and lies on the line `y = f * x + g`. It also
  holds a `direction` vector. `end` and `neighbour` start as `None`. When the
  two sites share a `y`, the division gives `inf` or `nan` instead of raising.
- `VEvent(point, is_place_event)` is a sweep-line event. Events compare by
  their `y` coordinate (`<`), so they can go on a `heapq`.

### `fieldsim.beachline`

`Parabola(site=None)` is a node of the beach-line tree. A node with a site is
a leaf (an arch). A node without one is an internal node, which can carry an
`edge`.

- `set_left` and `set_right` attach children and set their `parent`.
- These static helpers walk the tree:
  - `left_parent` and `right_parent`
  - `left_child` and `right_child`
  - `closest_left_leaf` and `closest_right_leaf`

  Each returns `None` when there is no such node. `left_parent` and
  `right_parent` raise `ValueError` for a node without a parent.

### `fieldsim.vmath`

- `Vec3` is a frozen 3D vector with `dot`.
- `Quat(w, x, y, z)` is a frozen quaternion. It has:
  - `vector()`, which returns the vector part.
  - The `*` operator, for the Hamilton product.
  - `rotate(angle, x, y, z)`, which multiplies by a rotation of `angle`
    radians about the given axis.
  - `to_matrix()`, which returns a 4×4 rotation matrix indexed
    `m[column][row]`.

### `fieldsim.graph`

`Graph(edges)` builds an undirected weighted graph from finished `VEdge`s,
that is, edges whose `end` is set. Otherwise it raises `ValueError`. Its
vertices are the endpoint ids, kept in sorted order. Edge weights are the
distances between the endpoint coordinates truncated to integers.

- `nearest_vertex(x, y)` returns the id of the vertex closest to the point.
  Ties go to the lowest id.
- `vertex_by_id(vertex_id)` returns the `(x, y)` of a vertex.
- `path_endpoints(start_vertices, end_vertices, start_x, start_y, end_x, end_y)`
  picks one vertex from each pair, giving the shortest three-leg route.
- `shortest_path(start, end)` runs Dijkstra. It returns the path from `end`
  back to `start`, tracing back at most `MAX_PATH_STEPS` (100) steps.
  - It raises `KeyError` for an unknown start.
  - It raises `ValueError` when `end` cannot be reached.
- `display(stream)` writes the vertices and weighted edges to a text stream.

`distance(a, b)` is the Euclidean distance between two `(x, y)` pairs.

### `fieldsim.scene`

Coordinates are in scene units (centimetres), with the origin at the top-left
corner.

- `transform_from_scene(x, y)` converts scene units to metres, with the origin
  at the centre of a 9 m × 6 m field.
- `bounding_square(center_x, center_y, half_side)` returns the rectangle
  `(left, top, width, height)`.
- `heat_color(intensity)` maps a value to an RGB `Color`.
  - Positive values give yellow shades. Zero and below give blue shades.
  - The magnitude is clamped to 200. Above 100 the shade gets darker; at or
    below 100 it gets lighter.
- `Team` (`BLUE`, `YELLOW`) gives a body `color`.
- `Bot(team, id, x, y, orientation)` has:
  - `update_position`.
  - `rotation_degrees`.
  - `outline()`, which returns the polygon points of a round body with its
    front cut off flat.
- `Ball` must be `place`d before `update_position`; otherwise that call raises
  `ValueError`. `bounds()` gives its drawing square.
- `HeatCell(x, y, intensity, width, radius)` is coloured by `heat_color`.
  `update_color(intensity, paint)` returns the new colour and stores it only
  when `paint` is true.

### `fieldsim.network`

- `VisionServer(port=10002, address="224.5.23.2")` sends UDP datagrams with a
  multicast TTL of 1.
  - `send(datagram)` returns `False` and logs a warning when the datagram did
    not go out whole.
  - `change_port` and `change_address` retarget later sends.
- `VisionReceiver(address="127.0.0.1", port=10020, on_state=None)` binds a
  non-blocking UDP socket.
  - `handle_datagrams()` reads every pending datagram, passes each payload to
    `on_state`, and returns the payloads.
  - `bound_port` holds the port actually bound.
  - `set_port_and_address` only records new values. It does not rebind.

Both classes are context managers and have `close()`.

### `fieldsim.simerrors`

- `SimError` lists the error kinds, each with a wire `code` and a message
  `prefix`.
- `SimErrorSource` lists who sent the message: `CONTROLLER`, `BLUE_TEAM` or
  `YELLOW_TEAM`.
- `make_error(code, source, appendix="", stream=None)` builds a
  `SimulatorError(code, message)`. It logs a timestamped line to `stream`,
  which defaults to stderr.
- `scale_up`, `scale_teleport_ball` and `scale_teleport_robot` multiply the set
  position and velocity fields of a dict by 1000, converting metres to
  millimetres.
- `latency_warning(delta)` returns a warning string when `delta` exceeds 1e6 ns.
- `unsupported_velocity_errors(robot_commands, source)` reports move commands
  given as wheel or global velocity.

### `fieldsim.specs`

- `convert_specs(spec, chip_distance)` checks a robot spec given as a dict. It
  needs:
  - `mass`, `limits` and `center_to_dribbler`.
  - A `custom` entry of type `"sslsim.RobotSpecErForce"` with `shoot_radius`
    and `dribbler_width`.
  - The six acceleration and velocity limits.
  - `id.id` and `id.team`.

  It returns `(is_blue, RobotSpecs)`. The first missing field raises
  `SpecError`. When no kick limits are given, both default to 100.
- `default_team(template, count=6)` returns copies of a spec numbered from 0.

### `fieldsim.relay`

- `build_feedback(responses, is_blue)` turns `RadioResponse`s into
  `RobotFeedback` for one team's robots that report ball detection.
- `CommandCache.handle_command(command)` remembers the team and realism
  settings from dict commands. When a command carries a `simulator_setup`, it
  returns the cached setup first, with the simulator enabled and charging on,
  followed by the command stripped of what the cache supplies. Otherwise it
  returns the command alone.

## What this package does not do

- It does not compute Voronoi diagrams. It provides the point, edge, event and
  beach-line node types, and a graph over edges you supply.
- It contains no physics simulation.
- It does not parse or write protobuf wire messages. Commands, specs and
  responses are plain dicts and dataclasses.
- It does no drawing and has no user interface. `scene` only computes
  positions, outlines and colours.
- It provides no command-line program.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Example

```python
from fieldsim.geometry import VPoint, VEdge
from fieldsim.graph import Graph

a, b, c = VPoint(0, 0, 0), VPoint(3, 4, 1), VPoint(6, 8, 2)
edges = [VEdge(a, VPoint(0, 1), VPoint(1, 0)), VEdge(b, VPoint(0, 1), VPoint(1, 0))]
edges[0].end, edges[1].end = b, c

graph = Graph(edges)
print(graph.nearest_vertex(5.0, 7.0))   # 2
print(graph.shortest_path(0, 2))        # [2, 1, 0]
```