"""Demo script for haversine distances and map path selection.

Usage:
    python examples/demo_map_paths.py
"""

from pathlib import Path

from geodist import haversine_distance, is_selected, load_map_paths

LANDMARKS = {
    "Eiffel Tower": (48.8584, 2.2945),
    "Ecole Militaire": (48.8510, 2.3030),
    "Trocadero": (48.8616, 2.2893),
    "Louvre": (48.8606, 2.3376),
}


def main():
    paths = load_map_paths(Path(__file__).parent / "paths.yaml")
    origin = LANDMARKS["Eiffel Tower"]

    print(f"{'Landmark':<18} {'Distance (m)':>12}  Selected")
    for name, (lat, lon) in LANDMARKS.items():
        d = haversine_distance(origin[0], origin[1], lat, lon)
        print(f"{name:<18} {d:>12.1f}  {is_selected(paths, lat, lon)}")


if __name__ == "__main__":
    main()
