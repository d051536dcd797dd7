# src/paint_color_matcher/demo.py
import argparse
import json
import logging
import sys


def _entry_json(entry, distance=None):
    out = {
        "hex": entry.hex.upper(),
        "name": entry.canonical_name,
        "family": entry.family.value,
        "shade": entry.description.label,
        "variants": list(entry.variant_display),
    }
    if distance is not None:
        out["distance"] = round(distance, 2)
    return out


def main(argv=None):
    """CLI demo: load a paint catalog, then match a hex color, search by name, or list swatches."""
    from dotenv import load_dotenv

    from .engine.errors import CatalogUnavailable, InvalidHexFormat
    from .engine.general.utils import ConfigFileNotFound, ConfigTypeError, load_settings, settings_from_env
    from .engine.service import PaintCatalogService

    load_dotenv()

    parser = argparse.ArgumentParser(
        prog="pcm-demo",
        description="Load a paint catalog and find the closest cataloged color to a hex value.",
    )
    parser.add_argument("catalog", nargs="?", help="Catalog JSON file or http(s) URL")
    parser.add_argument("hex", nargs="?", help="Query color (e.g. #ff6b4a, f0a)")
    parser.add_argument("--family", default="all")
    parser.add_argument("--type", dest="product_type", default="all")
    parser.add_argument("--brand", default="all")
    parser.add_argument("--sort", default=None, choices=["hue", "name", "brand", "type", "hex"])
    parser.add_argument("--top-k", type=int, default=None, dest="top_k", help="Also list the k nearest colors")
    parser.add_argument("--search", default=None, help="Fuzzy search by color name")
    parser.add_argument("--settings", default=None, help="Settings JSON file overlaid on PAINT_MATCHER_* env values")
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")

    args = parser.parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.debug else logging.WARNING)

    try:
        settings = load_settings(args.settings) if args.settings else settings_from_env()
    except (ValueError, ConfigFileNotFound, ConfigTypeError) as e:
        print(f"❌ Invalid settings: {e}", file=sys.stderr)
        return 3
    service = PaintCatalogService(settings)
    filters = {"family": args.family, "product_type": args.product_type, "brand": args.brand}

    try:
        catalog = service.load_source(args.catalog)
    except CatalogUnavailable as e:
        print(f"❌ Unable to load swatches: {e}", file=sys.stderr)
        return 1

    if args.search:
        hits = service.search(args.search, limit=args.top_k)
        result = {"query": args.search, "results": [dict(_entry_json(e), score=round(s, 1)) for e, s in hits]}
    elif args.hex:
        try:
            match = service.match(args.hex, sort=args.sort, **filters)
        except InvalidHexFormat:
            print("❌ Enter a valid hex color. Use 3 or 6 digit hex values like #ff6b4a.", file=sys.stderr)
            return 2
        result = {
            "input": match.query.upper(),
            "match": _entry_json(match.entry, match.distance) if match.found else "No match found",
        }
        if args.top_k:
            result["nearest"] = [
                _entry_json(m.entry, m.distance) for m in service.nearest(args.hex, args.top_k, **filters)
            ]
    else:
        entries = service.view(sort=args.sort, **filters)
        result = {
            "summary": f"{len(entries)} colors loaded",
            "dropped_records": catalog.stats.dropped,
            "colors": [_entry_json(e) for e in entries],
        }

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
