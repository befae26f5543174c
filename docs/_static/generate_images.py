"""Generate static images for the documentation."""

from pathlib import Path

from robinson import (
    TilingStyle,
    default_seed,
    generate,
    iter_generations,
    render_mpl,
    rhombus,
    sun,
)

OUT = Path(__file__).resolve().parent


def generate_docs_images() -> None:
    # Ten-triangle sun -- hero image
    tiles = generate(sun((0.0, 0.0), 100.0), 8)
    render_mpl(tiles, OUT / "sun.svg", figsize=(6, 6), dpi=150)
    print(f"  wrote {OUT / 'sun.svg'}")

    # First few generations of the demo seed, outlines only
    outline = TilingStyle(fill=False, edge_width=0.8)
    for n, working_set in enumerate(iter_generations([default_seed()], 4)):
        path = OUT / f"seed_generation_{n}.svg"
        render_mpl(working_set, path, style=outline, figsize=(3, 3))
        print(f"  wrote {path}")

    # Thin and thick rhombus pairs
    for thin in (True, False):
        name = "thin" if thin else "thick"
        pair = rhombus(thin, (0.0, 0.0), 100.0, 0.0)
        path = OUT / f"rhombus_{name}.svg"
        render_mpl(generate(pair, 6), path, figsize=(4, 4), edge_width=0.3)
        print(f"  wrote {path}")


if __name__ == "__main__":
    generate_docs_images()
