# meshview

The data and maths behind a small interactive 3D mesh viewer, usable without
a window or a graphics context:

- `meshview.vectors`: immutable `Vector2D` and `Vector3D` with dot and cross
  products, side-of-line tests, `unit_circle_intersection` and
  `line_intersection`
- `meshview.quaternion`: an immutable `Quaternion` with products, powers,
  vector rotation and a 4×4 matrix
- `meshview.arcball`: an `Arcball` that turns mouse drags into rotations
- `meshview.primitives`: coloured triangle, quad, cube, cone and cylinder
  meshes, and a sky box
- `meshview.textured`: a textured wall quad and a UV sphere with tangents and
  bitangents
- `meshview.objmodel`: a Wavefront OBJ reader that centres and scales the model
  and computes normals
- `meshview.transforms`: translation, scale, rotation, view and projection
  matrices
- `meshview.viewer`: view state driven by mouse and scroll events, and
  GPU-ready model buffers

The only runtime dependency is numpy. Python 3.10 or later is required.

## Primitives

```python
from meshview.primitives import cone, cube, cylinder, quad, skybox, triangle

box = cube()
print(box.count())            # 36 vertices, 12 triangles
print(box.positions.shape)    # (36, 3), float32
print(box.colors.shape)       # (36, 4), RGBA

c = cone(1.0, 2.0, 100)       # radius, height, slices
print(c.count())              # 600: the base fan, then the sides

tube = cylinder(1.0, 2.0, 500)
print(tube.count())           # 6000: two cap triangles and two side triangles per slice
```

A `ColoredMesh` holds unindexed triangles: one position and one RGBA colour
per vertex. Cones and cylinders are centred on the origin along the y axis.
Generated shapes are limited to `MAX_VERTICES` (6000) vertices; asking for
more slices, or for fewer than one, raises `ValueError`.

`skybox(texture_dir)` returns a `SkyBox` with the 36 cube vertices and the
paths of its six face images, `right.jpg`, `left.jpg`, `top.jpg`,
`bottom.jpg`, `front.jpg` and `back.jpg` in `texture_dir`.

## Textured geometry

```python
from meshview.textured import ball, wall_vertices

quad = wall_vertices()        # (6, 14): position, normal, uv, tangent, bitangent
sphere = ball(64, 64, 1.0)    # x segments, y segments, radius
print(sphere.vertices.shape)  # (65 * 65, 14)
print(sphere.tangents[:3])
```

`ball` returns an `IndexedMesh` whose rows are position, uv, normal, tangent
and bitangent, with `positions`, `uvs`, `normals`, `tangents` and
`bitangents` views and a flat `uint32` index array. Tangents and bitangents are
summed over the triangles around each vertex and normalized.

## Loading a model

```python
from meshview.objmodel import read_obj

model = read_obj("bunny.obj")
print(len(model.points), len(model.faces))
print(model.points[0].pos, model.points[0].normal)
```

Only `v x y z` and `f a b c` records are read; a face uses its first three
vertex indices (the part before any `/`), and these must refer to vertices
already read. After loading, the model is centred on the origin and scaled so
its largest extent is 1. Each face carries its unit normal, and each vertex
normal is the unnormalized sum of the normals of the faces around it.

`parse_obj` does the same from any iterable of lines. Malformed records and
out-of-range indices raise `ValueError` naming the line; a file that cannot be
opened raises `OSError`.

## Camera and interaction

```python
from meshview.viewer import ShapeId, ViewState, model_buffers

state = ViewState(shape=ShapeId.CUBE)
state.on_mouse_move(100, 100, False, False)
state.on_mouse_move(140, 120, False, True)   # right button held: rotate
state.on_mouse_move(150, 120, True, False)   # left button held: pan
state.on_scroll(1)                           # zoom in
mvp = state.mvp(700, 700)                    # 4×4 numpy array

vertices, uvs, indices = model_buffers(model)
```

Dragging with the left button pans by 0.01 per pixel; dragging with the right
button rotates by 0.005 radians per pixel. Each scroll step changes the scale
by 0.1, never below 0.1. The model matrix is translation, then scale, then
rotation; `mvp` views it from the camera position (0, 0, 10) with a 60° field
of view and near and far planes at 1 and 1000.

`model_buffers` returns interleaved position and normal rows, spherical
texture coordinates from `spherical_uv`, and zero-based triangle indices.

The helpers in `meshview.transforms` (`translation_matrix`, `scale_matrix`,
`angle_axis`, `quaternion_matrix`, `look_at` and `perspective`) return
matrices that act on column vectors; transpose them for column-major upload.

## Arcball

```python
from meshview.arcball import Arcball

arc = Arcball(700, 700, 350, 350)
rotation = arc.update(360, 340)   # a Quaternion for the drag since the last call
matrix = rotation.to_matrix()
```

## What this package does not do

It opens no window, compiles no shaders, loads no texture images and draws
nothing. It supplies the vertex data, buffers, matrices and interaction state
that a renderer needs; the rendering itself is left to whatever graphics
library you use.