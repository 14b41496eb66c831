from __future__ import annotations
from collections import Counter
import os, sys
from readiness_core.question_bank import load_banks, SECTIONS, DIMENSIONS

# Configurable targets; defaults match the bundled bank
TARGETS = {
    "psychometric_min": int(os.getenv("TARGET_PSYCHOMETRIC_MIN", 8)),
    "aptitude_min": int(os.getenv("TARGET_APTITUDE_MIN", 6)),
    "wiscar_min": int(os.getenv("TARGET_WISCAR_MIN", 8)),
    "dimension_min": int(os.getenv("TARGET_DIMENSION_MIN", 1)),
}

def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    banks = load_banks(argv[0] if argv else None)

    print(f"Targets: ≥{TARGETS['psychometric_min']} psychometric, ≥{TARGETS['aptitude_min']} aptitude, "
          f"≥{TARGETS['wiscar_min']} WISCAR (≥{TARGETS['dimension_min']} per dimension).\n")

    short = 0
    for s in SECTIONS:
        qs = banks[s]
        tags = Counter(q.tag for q in qs)
        print(f"{s}: {len(qs)} questions  " + "  ".join(f"{k}={v}" for k, v in sorted(tags.items())))
        need = max(0, TARGETS[f"{s}_min"] - len(qs))
        if s == "wiscar":
            for d in DIMENSIONS:
                gap = max(0, TARGETS["dimension_min"] - tags.get(d, 0))
                if gap:
                    print(f"  → Add {gap} question(s) for {d}")
                    short += gap
        if need:
            print(f"  → Add {need} question(s)\n"); short += need
        else:
            print("  ✓ Meets targets\n")
    return 1 if short else 0

if __name__ == "__main__":
    raise SystemExit(main())
