"""Generate a synthetic occupancy dataset for local runs and tests."""

import json
import random
import sys

from config.defaults import FLOORS, UNITS_PER_FLOOR

OWNERS = [
    "Ivanov I.I.", "Petrova A.S.", "Sidorov P.K.", "Kuznetsova E.V.", "Smirnov D.A.",
    "Popova M.N.", "Volkov A.A.", "Fedorova O.I.", "Morozov K.S.", "Lebedeva T.P.",
]
AREAS = ["40.71", "54.2", "62.35", "38.9", "71.05"]
BLOCKS = ["A", "B"]


def generate_occupancy(occupancy_rate: float = 0.35, seed: int = 42) -> dict:
    """Occupancy document in the wire format: floor -> number -> record."""
    rng = random.Random(seed)
    data = {}
    client_seq = 1
    for floor in FLOORS:
        for number in range(1, UNITS_PER_FLOOR + 1):
            if rng.random() >= occupancy_rate:
                continue
            data.setdefault(floor, {})[str(number)] = {
                "owner": rng.choice(OWNERS),
                "area": rng.choice(AREAS),
                "block": rng.choice(BLOCKS),
                "client_id": f"c{client_seq}",
            }
            client_seq += 1
    return data


def write_sample_file(path: str = "apartments_status.json", **kwargs) -> dict:
    data = generate_occupancy(**kwargs)
    with open(path, "w", encoding="utf-8") as f:
        json.dump(data, f, ensure_ascii=False, indent=2)
    return data


if __name__ == "__main__":
    target = sys.argv[1] if len(sys.argv) > 1 else "apartments_status.json"
    written = write_sample_file(target)
    print(f"Wrote {sum(len(u) for u in written.values())} occupied apartments to {target}")
