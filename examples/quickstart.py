from __future__ import annotations


def main() -> None:
    # [START README_QUICKSTART]
    import math

    from rootfind import FindSettings, find, find_root

    # Finite domain
    print("x - 7 on [-3, 10]:", find_root(lambda x: x - 7.0, -3.0, 10.0, tol=1e-12))

    # Unbounded domain: an outward doubling search finds the bracket first
    res = find(lambda x: x**3 - 2.0, -math.inf, math.inf, tol=1e-12)
    print("cube root of 2:", res.root, "evaluations:", res.evaluations)

    # Evaluation cap: the best estimate is returned with the failure status
    capped = find(
        lambda x: math.exp(x) - 10.0,
        0.0,
        math.inf,
        tol=1e-14,
        settings=FindSettings(max_evaluations=8, concurrent=True),
    )
    print("capped:", capped.status.value, "best estimate:", capped.root)
    # [END README_QUICKSTART]


if __name__ == "__main__":
    main()
