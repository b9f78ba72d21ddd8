import math

import numpy as np

from envelopes import DynamicEnvelope, MonotonicEnvelope, StaticEnvelope
from utils.brute_force import brute_force_maximum
from visualization.save_outputs import save_all_outputs

from config import OUTPUT_FOLDER, get_active_params


def generate_lines(rng, count, params):
    """
    Random (a, b) pairs in the configured ranges, as Python ints or floats.
    """
    (a_lo, a_hi), (b_lo, b_hi) = params["SLOPE_RANGE"], params["INTERCEPT_RANGE"]

    if params["INTEGER_MODE"]:
        slopes = rng.integers(a_lo, a_hi, size=count, endpoint=True)
        intercepts = rng.integers(b_lo, b_hi, size=count, endpoint=True)
        return [(int(a), int(b)) for a, b in zip(slopes, intercepts)]

    slopes = rng.uniform(a_lo, a_hi, size=count)
    intercepts = rng.uniform(b_lo, b_hi, size=count)
    return [(float(a), float(b)) for a, b in zip(slopes, intercepts)]


def generate_queries(rng, count, params):
    lo, hi = params["QUERY_RANGE"]
    if params["INTEGER_MODE"]:
        return [int(x) for x in rng.integers(lo, hi, size=count, endpoint=True)]
    return [float(x) for x in rng.uniform(lo, hi, size=count)]


def _agrees(got, expected):
    if isinstance(expected, int):
        return got == expected
    return math.isclose(got, expected, rel_tol=1e-9, abs_tol=1e-9)


def run_demo(seed=None):
    """
    Runs the complete demo:
      1. Generate random lines and query points
      2. Build the dynamic, monotonic and static envelopes
      3. Compare every answer with the brute-force maximum
      4. Save a rendering of each envelope

    Returns the number of mismatching answers.
    """
    params = get_active_params()
    rng = np.random.default_rng(params["DEMO_SEED"] if seed is None else seed)

    print("\n=== Building envelopes ===")
    lines = generate_lines(rng, params["DEMO_LINE_COUNT"], params)
    queries = generate_queries(rng, params["DEMO_QUERY_COUNT"], params)

    dynamic = DynamicEnvelope(lines)
    monotonic = MonotonicEnvelope(sorted(lines))
    static = StaticEnvelope.construct(lines)

    print(f"[OK] {len(lines)} lines -> {len(dynamic)} on the envelope")

    # ------------------------------
    # CROSS-CHECK AGAINST BRUTE FORCE
    # ------------------------------
    print("\n=== Checking queries ===")
    mismatches = 0
    for x in sorted(queries):
        expected = brute_force_maximum(lines, x)
        answers = {
            "dynamic": dynamic.maximum(x),
            "monotonic": monotonic.maximum(x),
            "static": static.maximum(x),
        }
        for name, got in answers.items():
            if not _agrees(got, expected):
                mismatches += 1
                print(f"[WARN] {name} maximum({x}) = {got}, expected {expected}")

    if mismatches:
        print(f"[ERROR] {mismatches} mismatching answers")
    else:
        print(f"[OK] {len(queries)} queries agree with brute force")

    # ------------------------------
    # SAVE RENDERINGS
    # ------------------------------
    # The monotonic container has already pruned the lines left of the last
    # query, so it is rendered from a fresh copy.
    written = save_all_outputs(
        output_dir=OUTPUT_FOLDER,
        run_id=f"seed{params['DEMO_SEED'] if seed is None else seed}",
        envelopes={
            "dynamic": dynamic,
            "monotonic": MonotonicEnvelope(sorted(lines)),
            "static": static,
        },
        lines=lines,
        x_range=params["QUERY_RANGE"],
    )
    for path in written:
        print(f"[OK] Saved {path}")

    return mismatches


def main():
    """
    Main entry point.
    """
    mismatches = run_demo()
    print("\n=== Demo finished ===")
    return 1 if mismatches else 0


if __name__ == "__main__":
    raise SystemExit(main())
