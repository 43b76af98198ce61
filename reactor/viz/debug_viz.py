from vedo import Plotter, Box as VedoBox, Text3D

from typing import Any, Dict, Iterable, List, Optional, Tuple

from reactor.models.geometry import Cuboid


palette = [
    'darkgreen', 'tomato', 'yellow', 'darkblue', 'darkviolet', 'indianred', 'yellowgreen', 'mediumblue', 'cyan',
    'indigo', 'pink', 'lime', 'sienna', 'plum', 'deepskyblue', 'forestgreen', 'fuchsia', 'brown',
    'turquoise', 'blueviolet', 'rosybrown', 'powderblue', 'steelblue', 'dodgerblue', 'slategray',
    'cornflowerblue', 'royalblue', 'midnightblue', 'navy', 'slateblue', 'mediumpurple', 'darkorchid',
]


def box_params(c: Cuboid) -> Dict[str, Any]:
    """Center + edge lengths of a cuboid, as vedo.Box wants them."""
    L, W, H = c.x.length, c.y.length, c.z.length
    return {
        "pos": (c.x.start + L / 2, c.y.start + W / 2, c.z.start + H / 2),
        "length": float(L),
        "width": float(W),
        "height": float(H),
    }


def bounds_of(cuboids: Iterable[Cuboid]) -> Optional[Tuple[int, int, int, int, int, int]]:
    """(x0, x1, y0, y1, z0, z1) enclosing all cuboids; None for an empty set."""
    items = list(cuboids)
    if not items:
        return None
    return (
        min(c.x.start for c in items), max(c.x.end for c in items),
        min(c.y.start for c in items), max(c.y.end for c in items),
        min(c.z.start for c in items), max(c.z.end for c in items),
    )


def build_actors(cuboids: List[Cuboid], alpha: float = 0.7, show_labels: bool = False) -> List[Any]:
    actors: List[Any] = []
    for idx, c in enumerate(cuboids):
        params = box_params(c)
        actors.append(VedoBox(**params).alpha(alpha).c(palette[idx % len(palette)]))
        if show_labels:
            x, y, _ = params["pos"]
            actors.append(Text3D(f"C{idx}", pos=(x, y, c.z.end + 1), s=max(params["height"] / 10, 0.5), c="black"))
    return actors


def plot_cuboid_set(
    cuboids: List[Cuboid],
    title: str = "Reactor Debug View",
    show_labels: bool = False,
    interactive: bool = True,
) -> Plotter:
    """
    Visualizes the disjoint cover of the lit region: one colored box per member,
    so fragmentation left behind by union/subtract is visible at a glance.
    """
    axes_opts = dict(
        xtitle='X', ytitle='Y', ztitle='Z',
        xygrid=True, zxgrid=True, yzgrid=True,
        xyplane_color='lightgray', xygrid_color='gray', xyalpha=0.1,
    )
    bounds = bounds_of(cuboids)
    if bounds is not None:
        x0, x1, y0, y1, z0, z1 = bounds
        axes_opts.update(xrange=(x0, x1), yrange=(y0, y1), zrange=(z0, z1))

    vp = Plotter(title=title, axes=axes_opts, bg="white")
    for actor in build_actors(cuboids, show_labels=show_labels):
        vp += actor

    vp.show(interactive=interactive)
    return vp
