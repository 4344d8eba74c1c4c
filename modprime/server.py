# modprime/server.py
# JSON API over the 64-bit primality core
#   GET  /api/is_prime?n=...        POST /api/is_prime {"n": ...} | {"numbers": [...]}
#   GET  /api/next_prime?n=...      GET  /api/prev_prime?n=...
#   GET  /api/modpow?a=&b=&m=       GET  /api/health

import os, time
from flask import Flask, request, jsonify
from werkzeug.exceptions import BadRequest

from .cli import parse_u64
from .miller_rabin import is_prime, WITNESS_BASES
from .modarith import mod_pow
from .nextprime import next_prime, prev_prime

HOST      = os.getenv("MODPRIME_HOST", "127.0.0.1")
PORT      = int(os.getenv("MODPRIME_PORT", "8082"))
MAX_BATCH = int(os.getenv("MODPRIME_MAX_BATCH", "1000"))
DEBUG     = os.getenv("MODPRIME_DEBUG", "").strip().lower() in ("1", "true", "yes")

def _u64(value, name: str = "n") -> int:
    if value is None or str(value).strip() == "":
        raise BadRequest(f"missing {name}")
    try:
        return parse_u64(value)
    except ValueError:
        raise BadRequest(f"{name} must be a 64-bit unsigned integer (0..2^64-1)")

def _ms(t0: float) -> int:
    return int((time.perf_counter() - t0) * 1000)

def create_app(max_batch: int = MAX_BATCH) -> Flask:
    app = Flask(__name__)
    app.config["MAX_BATCH"] = max_batch

    @app.errorhandler(BadRequest)
    def bad_request(e):
        app.logger.info("rejected %s %s: %s", request.method, request.path, e.description)
        return jsonify(ok=False, error=e.description), 400

    @app.get("/api/is_prime")
    def api_is_prime_query():
        t0 = time.perf_counter()
        n = _u64(request.args.get("n"))
        return jsonify(ok=True, n=str(n), prime=is_prime(n), duration_ms=_ms(t0))

    @app.post("/api/is_prime")
    def api_is_prime_json():
        t0 = time.perf_counter()
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise BadRequest("expected a JSON object")
        if "numbers" in data:
            raw = data["numbers"]
            if not isinstance(raw, list):
                raise BadRequest("numbers must be a list")
            if len(raw) > app.config["MAX_BATCH"]:
                raise BadRequest(f"at most {app.config['MAX_BATCH']} numbers per request")
            ns = [_u64(v) for v in raw]
            app.logger.debug("batch of %d", len(ns))
            results = [{"n": str(n), "prime": is_prime(n)} for n in ns]
            return jsonify(ok=True, results=results, duration_ms=_ms(t0))
        n = _u64(data.get("n"))
        return jsonify(ok=True, n=str(n), prime=is_prime(n), duration_ms=_ms(t0))

    def _walk(fn):
        t0 = time.perf_counter()
        n = _u64(request.args.get("n"))
        try:
            p, iters = fn(n, return_iters=True)
        except ValueError as e:
            raise BadRequest(str(e))
        return jsonify(ok=True, n=str(n), prime=str(p), iters=iters, duration_ms=_ms(t0))

    @app.get("/api/next_prime")
    def api_next_prime():
        return _walk(next_prime)

    @app.get("/api/prev_prime")
    def api_prev_prime():
        return _walk(prev_prime)

    @app.get("/api/modpow")
    def api_modpow():
        a = _u64(request.args.get("a"), "a")
        b = _u64(request.args.get("b"), "b")
        m = _u64(request.args.get("m"), "m")
        if m == 0:
            raise BadRequest("m must be positive")
        return jsonify(ok=True, a=str(a), b=str(b), m=str(m), result=str(mod_pow(a, b, m)))

    @app.get("/api/health")
    def api_health():
        return jsonify(ok=True, bases=list(WITNESS_BASES), time=int(time.time()))

    return app

app = create_app()

if __name__ == "__main__":
    app.run(HOST, PORT, debug=DEBUG)
