#!/usr/bin/env python3
# Cross-check a running modprime server against sympy.isprime.
#   BASE_URL=http://127.0.0.1:8082 python3 run_accuracy_suite.py
import os, csv, random
from concurrent.futures import ThreadPoolExecutor, as_completed

import requests
from sympy import randprime, isprime

BASE    = (os.getenv("BASE_URL", "http://127.0.0.1:8082") or "http://127.0.0.1:8082").rstrip("/")
TIMEOUT = float(os.getenv("TIMEOUT", "15"))
U64     = 1 << 64

session = requests.Session()
session.headers.update({"User-Agent": "modprime-accuracy-suite"})

def check_remote(n):
    r = session.get(f"{BASE}/api/is_prime", params={"n": str(n)}, timeout=TIMEOUT)
    r.raise_for_status()
    return r.json()

def rand_k_digit_prime(k):
    return int(randprime(10**(k-1), 10**k - 1))

def rand_composite(k):
    # odd product of two roughly half-size factors, or a prime power
    if k <= 6:
        p = rand_k_digit_prime(max(1, k // 2))
        n = p * p
    else:
        a = random.randrange(10**(k//2 - 1), 10**(k//2)) | 1
        b = random.randrange(10**(k - k//2 - 1), 10**(k - k//2)) | 1
        n = a * b
    return n

def run_case(n, tag):
    res = check_remote(n)
    want = bool(isprime(n))
    got = res.get("prime")
    return {
        "n": str(n),
        "digits": len(str(n)),
        "tag": tag,
        "expected": want,
        "got": got,
        "ok": got is want,
        "reason": "" if got is want else f"server={got} sympy={want}",
    }

def main():
    random.seed(42)
    jobs = []

    # A) Handpicked fixtures: Carmichael numbers, strong pseudoprimes, 64-bit edges
    jobs += [(n, "fixture") for n in (
        0, 1, 2, 3, 4, 97, 561, 1105, 1729, 2047, 3215031751,
        341550071728321, 3825123056546413051,
        4294967291, 2305843009213693951, U64 - 59, U64 - 1,
    )]

    # B) Random primes by digit count
    for k in range(2, 20):
        for _ in range(3):
            jobs.append((rand_k_digit_prime(k), "prime"))

    # C) Random odd composites
    for k in range(3, 20):
        for _ in range(4):
            jobs.append((rand_composite(k), "composite"))

    results = []
    with ThreadPoolExecutor(max_workers=8) as ex:
        futs = {ex.submit(run_case, n, tag): (n, tag) for n, tag in jobs}
        for fut in as_completed(futs):
            n, tag = futs[fut]
            try:
                results.append(fut.result())
            except requests.RequestException as e:
                results.append({"n": str(n), "digits": len(str(n)), "tag": tag, "expected": None,
                                "got": None, "ok": False, "reason": f"HTTP: {e}"})

    total = len(results)
    ok = sum(1 for r in results if r["ok"])
    by = {}
    for r in results:
        by.setdefault(r["tag"], [0, 0])
        by[r["tag"]][0 if r["ok"] else 1] += 1

    print("\n=== SUMMARY ===")
    print(f"Total: {total} | PASS: {ok} | FAIL: {total-ok}")
    for k, (p, f) in by.items():
        print(f"  {k:10s}  PASS {p:3d}  FAIL {f:3d}")

    fails = [r for r in results if not r["ok"]]
    if fails:
        fn = "accuracy_failures.csv"
        with open(fn, "w", newline="") as f:
            w = csv.DictWriter(f, fieldnames=list(fails[0].keys()))
            w.writeheader()
            w.writerows(fails)
        print(f"\nWrote details for {len(fails)} failures to {fn}")
        return 1
    print("\nNo failures recorded.")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
