"""
Visualizing the sRGB gamut in HCT.
"""
import sys

try:
    import matplotlib.pyplot as plt
except ImportError:
    print("tonal.plot requires matplotlib. Please install the package,")
    print("e.g., by executing `pip install matplotlib`, and then")
    print("run `python -m tonal.plot` again.")
    sys.exit(1)

import argparse
import logging
import math
from typing import Any, cast

from .color import Hct, parse_hex, to_hex


MAX_CHROMA = 200.0


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="""
            Plot the boundary of the sRGB gamut on the hue/chroma plane of HCT
            for a given tone. For every sampled hue, this script requests a
            color with excessive chroma and lets gamut mapping reduce it to the
            largest displayable chroma.
        """,
        epilog="""
            Extra colors are written in hash hexadecimal notation, e.g.,
            #4285f4. They are plotted at their own hue and chroma, even if
            their tone differs from the plotted one.
        """
    )
    parser.add_argument(
        "-q", "--quiet",
        action="count",
        default=0,
        help="run silently, without printing status updates"
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="run in verbose mode; use twice to also log gamut mapping"
    )
    parser.add_argument(
        "-t", "--tone",
        type=float,
        default=50.0,
        help="plot the gamut boundary for this tone (default: 50)"
    )
    parser.add_argument(
        "-s", "--step",
        type=int,
        default=5,
        help="sample hues in increments of this many degrees (default: 5)"
    )
    parser.add_argument(
        "-c", "--color",
        action="append",
        dest="colors",
        help="also plot color specified in hex notation"
    )
    parser.add_argument(
        "-o", "--output",
        help="write plot to the named file"
    )
    return parser


class GamutPlotter:
    def __init__(self, tone: float, step: int, volume: int = 1) -> None:
        if not 1 <= step <= 90:
            raise ValueError(f"step {step} is not between 1 and 90 degrees")

        self._tone = tone
        self._step = step
        self._volume = volume

        # Gamut boundary
        self._boundary: list[Hct] = []

        # Extra colors
        self._extras: list[Hct] = []

    def status(self, msg: str) -> None:
        if self._volume >= 1:
            print(msg)

    def detail(self, msg: str) -> None:
        if self._volume >= 2:
            print(msg)

    # ----------------------------------------------------------------------------------
    # Gamut Tracing and Extra Colors

    def trace_boundary(self) -> None:
        self.status(f"Tracing gamut boundary for tone {self._tone}")
        self.detail("Requested  Hue     Chroma   Tone   Color")
        self.detail("-----------------------------------------")

        for hue in range(0, 360, self._step):
            color = Hct.of(hue, MAX_CHROMA, self._tone)
            self._boundary.append(color)
            self.detail(
                f"{hue:>9}  {color.hue:6.2f}  {color.chroma:7.3f}  "
                f"{color.tone:5.2f}  {to_hex(color.to_argb())}"
            )

        peak = max(self._boundary, key=lambda c: c.chroma)
        self.status(f"Largest chroma {peak.chroma:.2f} at hue {peak.hue:.2f}")

    def add(self, spec: str) -> None:
        color = Hct.from_argb(parse_hex(spec))
        self._extras.append(color)
        self.status(f"Adding {spec} as {color}")

    # ----------------------------------------------------------------------------------
    # Figure Creation

    def create_figure(self) -> Any:
        self.status("Creating figure")

        fig: Any = plt.figure(layout="constrained", figsize=(5, 5.5))  # type: ignore
        axes: Any = fig.add_subplot(polar=True)

        # Close the boundary by repeating its first point
        closed = [*self._boundary, *self._boundary[:1]]
        axes.plot(
            [math.radians(c.hue) for c in closed],
            [c.chroma for c in closed],
            color="#888",
            linewidth=1,
            zorder=2,
        )

        for color in self._boundary:
            axes.scatter(
                [math.radians(color.hue)],
                [color.chroma],
                c=[to_hex(color.to_argb())],
                s=[40],
                edgecolors="#000",
                linewidths=0.5,
                zorder=4,
            )

        for color in self._extras:
            axes.scatter(
                [math.radians(color.hue)],
                [color.chroma],
                c=[to_hex(color.to_argb())],
                s=[80],
                marker="d",
                edgecolors="#000",
                zorder=5,
            )

        gray = to_hex(Hct.of(0.0, 0.0, self._tone).to_argb())
        axes.scatter([0], [0], c=[gray], s=[80], edgecolors="#000", zorder=5)

        axes.set_rlim(0, math.ceil(max(c.chroma for c in self._boundary) / 10) * 10)
        axes.set_rlabel_position(45)
        axes.tick_params(labelsize=9)

        fig.suptitle("sRGB Gamut in HCT", ha="left", x=0.044, weight="bold", size=13)
        axes.set_title(
            f"Hue & Chroma at Tone {self._tone:g}",
            style="italic", size=13, x=0.2, y=1.01,
        )
        return fig


# ======================================================================================

def main(options: Any) -> None:
    volume = 1 - options.quiet + options.verbose
    if volume >= 3:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    plotter = GamutPlotter(options.tone, options.step, volume=volume)
    plotter.trace_boundary()

    for spec in cast(list[str], options.colors or []):
        plotter.add(spec)

    file_name = options.output or f"hct-gamut-tone-{options.tone:g}.svg"

    fig = plotter.create_figure()
    plotter.status(f"Saving plot to `{file_name}`")
    fig.savefig(file_name, bbox_inches="tight")  # type: ignore
    plotter.status("Done.")


if __name__ == "__main__":
    main(create_parser().parse_args())
