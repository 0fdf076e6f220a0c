from __future__ import annotations
import argparse
from dataclasses import asdict
from flask import Flask, request, jsonify, Response
from gentext.engine import Engine
from gentext import config as CFG

app = Flask(__name__)
_engine: Engine | None = None

# ---------- API ----------
@app.get("/api/generate")
def api_generate():
    q = request.args.get("q", "", type=str)
    n = request.args.get("n", None, type=int)
    seed = request.args.get("seed", None, type=int)
    if n is not None and n < 0:
        return jsonify({"error": "n must be >= 0"}), 400
    phrase = q if q.strip() else None
    result = _engine.generate(phrase, max_words=n, seed=seed)  # type: ignore
    return jsonify(asdict(result))

@app.get("/api/health")
def api_health():
    if _engine is None or _engine.generator is None:
        return jsonify({"ok": False}), 503
    return jsonify({"ok": True, **_engine.stats()})

# ---------- UI ----------
@app.get("/")
def home():
    # Single page, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Text Generator • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial; }
.container{ max-width:860px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
.controls{ display:flex; gap:12px; align-items:center; flex-wrap:wrap; }
.controls input{ padding:10px 12px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); font-size:16px; }
#q{ flex:1; min-width:240px }
#n{ width:80px }
.btn{ padding:10px 14px; border-radius:10px; border:1px solid var(--border); background:#0b1117; color:var(--ink); cursor:pointer; }
.btn:hover{ border-color:var(--accent) }
#out{ margin-top:16px; white-space:pre-wrap; min-height:3em }
#stats{ color:var(--muted); font-size:13px; margin-top:6px }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Text Generator</h1>
      <form id="f" class="controls">
        <input id="q" type="text" placeholder="Seed phrase (empty for a random start)" autocomplete="off" autofocus />
        <input id="n" type="number" min="0" max="500" value="20" />
        <button class="btn" type="submit">Generate</button>
      </form>
      <div id="stats">Ready.</div>
      <div id="out"></div>
    </div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
$("#f").addEventListener("submit", async (ev)=>{
  ev.preventDefault();
  const q = $("#q").value, n = parseInt($("#n").value || "20", 10);
  try{
    const resp = await fetch(`/api/generate?q=${encodeURIComponent(q)}&n=${n}`);
    const data = await resp.json();
    if(!resp.ok) throw new Error(data.error || `HTTP ${resp.status}`);
    $("#out").textContent = data.text;
    $("#stats").textContent = `Generated ${data.words} words (order ${data.order})`;
  }catch(e){
    $("#stats").textContent = `Error: ${e.message ?? e}`;
  }
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("paths", nargs="+", help="Training files or folders")
    ap.add_argument("--order", type=int, default=CFG.DEFAULT_ORDER)
    ap.add_argument("--sampler", choices=["span", "reservoir"], default=CFG.SAMPLER)
    ap.add_argument("--host", default=CFG.HOST)
    ap.add_argument("--port", type=int, default=CFG.PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.order < 1:
        ap.error("--order must be >= 1")

    global _engine
    _engine = Engine()
    _engine.build(args.paths, order=args.order, sampler=args.sampler, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
