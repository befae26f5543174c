"""Demo script: refine the default seed triangle and render it with matplotlib."""

import argparse
import logging
from pathlib import Path

from robinson import count_types, default_seed, generate, load_config, render_mpl

OUTPUT = Path(__file__).resolve().parent / "robinson.pdf"


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("-n", "--generations", type=int, default=6)
    parser.add_argument("-c", "--config", type=Path, default=None,
                        help="JSON tiling config (overrides --generations)")
    parser.add_argument("-o", "--output", type=Path, default=OUTPUT)
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    if args.config is not None:
        config = load_config(args.config)
        seeds, generations, style = config.seeds, config.generations, config.style
    else:
        seeds, generations, style = [default_seed()], args.generations, None

    tiles = generate(seeds, generations)
    print(f"Generated {len(tiles)} triangles after {generations} generation(s)")
    for kind, n in sorted(count_types(tiles).items()):
        print(f"  {kind.value}: {n}")

    render_mpl(tiles, output=args.output, style=style)
    print(f"Rendered to {args.output}")


if __name__ == "__main__":
    main()
