# modprime/cli.py
# modprime check N [N ...]      (or one N per line on stdin)
# modprime next START | prev START
# modprime verify --upto L      (exhaustive cross-check against the sieve)

from __future__ import annotations
import sys, json, time, argparse

from .miller_rabin import is_prime, witnesses
from .modarith import U64_MAX
from .nextprime import next_prime, prev_prime
from .sieve import prime_sieve

def parse_u64(text: str) -> int:
    """Decimal or 0x-hex text -> int in [0, 2^64). ValueError otherwise."""
    s = str(text).strip().replace("_", "")
    n = int(s, 16) if s.lower().startswith("0x") else int(s, 10)
    if n < 0 or n > U64_MAX:
        raise ValueError("n must be a 64-bit unsigned integer (0..2^64-1)")
    return n

def _check_one(n: int, as_json: bool, show_witnesses: bool):
    prime = is_prime(n)
    if as_json:
        out = {"n": str(n), "prime": prime}
        if show_witnesses:
            out["witnesses"] = witnesses(n)
        print(json.dumps(out))
        return
    line = f"{n}\t{'prime' if prime else 'composite'}"
    if show_witnesses and not prime:
        bases = witnesses(n)
        if bases:
            line += "\t" + ",".join(str(a) for a in bases)
    print(line)

def cmd_check(args) -> int:
    rc = 0
    tokens = args.N if args.N else (ln.strip() for ln in sys.stdin)
    for tok in tokens:
        if not tok:
            continue
        try:
            n = parse_u64(tok)
        except ValueError:
            print(f"# skip: {tok}", file=sys.stderr); rc |= 1; continue
        _check_one(n, args.json, args.witnesses)
    return rc

def _walk(fn, args) -> int:
    try:
        start = parse_u64(args.start)
        t0 = time.perf_counter()
        p, iters = fn(start, return_iters=True)
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    ms = (time.perf_counter() - t0) * 1000
    print(json.dumps({"start": start, "prime": p, "iters": iters, "ms": round(ms, 3)}))
    return 0

def cmd_next(args) -> int:
    return _walk(next_prime, args)

def cmd_prev(args) -> int:
    return _walk(prev_prime, args)

def cmd_verify(args) -> int:
    t0 = time.perf_counter()
    truth = prime_sieve(args.upto)
    bad = [n for n in range(args.upto + 1) if is_prime(n) != bool(truth[n])]
    ms = (time.perf_counter() - t0) * 1000
    print(f"checked 0..{args.upto}: {int(truth.sum())} primes, {len(bad)} mismatches ({ms:.0f} ms)")
    for n in bad[:20]:
        print(f"  mismatch {n}: is_prime={is_prime(n)} sieve={bool(truth[n])}")
    return 1 if bad else 0

def _non_negative(text: str) -> int:
    n = int(text)
    if n < 0:
        raise argparse.ArgumentTypeError("must be non-negative")
    return n

def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="modprime",
        description="Deterministic 64-bit Miller–Rabin primality tools.")
    sub = ap.add_subparsers(dest="cmd", required=True)

    c = sub.add_parser("check", help="classify integers as prime/composite")
    c.add_argument("N", nargs="*", help="integers (decimal or 0x-hex); stdin if omitted")
    c.add_argument("--json", action="store_true", help="one JSON object per line")
    c.add_argument("--witnesses", action="store_true", help="list bases proving compositeness")
    c.set_defaults(func=cmd_check)

    for name, fn, what in (("next", cmd_next, "smallest prime >= START"),
                           ("prev", cmd_prev, "largest prime <= START")):
        w = sub.add_parser(name, help=what)
        w.add_argument("start")
        w.set_defaults(func=fn)

    v = sub.add_parser("verify", help="cross-check is_prime against a sieve")
    v.add_argument("--upto", type=_non_negative, default=100_000)
    v.set_defaults(func=cmd_verify)
    return ap

def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)

if __name__ == "__main__":
    raise SystemExit(main())
