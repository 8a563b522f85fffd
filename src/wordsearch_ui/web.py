from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from wordsearch.config import DEFAULT_FILE, TOP_K
from wordsearch.engine import Engine

app = Flask(__name__)
_engine: Engine | None = None
MAX_K = 50


def _engine_or_503():
    if _engine is None or _engine.index is None:
        return None, (jsonify({"error": "index not loaded"}), 503)
    return _engine, None


def _k_arg() -> int:
    k = request.args.get("k", TOP_K, type=int)
    return max(1, min(MAX_K, k))


# ---------- API ----------
@app.get("/health")
def health():
    return jsonify({"ok": True, "loaded": _engine is not None and _engine.index is not None})


@app.get("/api/stats")
def api_stats():
    eng, err = _engine_or_503()
    if err:
        return err
    return jsonify(eng.stats())


@app.get("/api/complete")
def api_complete():
    eng, err = _engine_or_503()
    if err:
        return err
    q = request.args.get("q", "", type=str)
    if not q:
        return jsonify({"results": [], "total_candidates": 0, "elapsed": 0.0})
    return jsonify(eng.complete(q, top_k=_k_arg()).to_dict())


@app.get("/api/fuzzy")
def api_fuzzy():
    eng, err = _engine_or_503()
    if err:
        return err
    q = request.args.get("q", "", type=str)
    d = request.args.get("d", None, type=int)
    if d is not None and d < 0:
        return jsonify({"error": "d must be >= 0"}), 400
    if not q:
        return jsonify({"results": [], "total_candidates": 0, "elapsed": 0.0})
    return jsonify(eng.fuzzy_complete(q, top_k=_k_arg(), max_distance=d).to_dict())


@app.get("/api/lookup")
def api_lookup():
    eng, err = _engine_or_503()
    if err:
        return err
    w = request.args.get("w", "", type=str)
    occ = eng.lookup(w)
    if occ is None:
        return jsonify({"word": w, "found": False, "locations": []})
    return jsonify({
        "word": w,
        "found": True,
        "locations": [{"line": o.line, "word": o.word} for o in occ],
    })


# ---------- UI ----------
@app.get("/")
def home():
    # A tiny SPA: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Word search • Flask UI</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530; --ok:#45d483;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:980px; margin:24px auto; padding:0 16px; }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0; }
h2{ font-size:15px; margin:16px 0 6px 0; color:var(--muted); }
.controls{ display:flex; gap:12px; align-items:center; margin:12px 0 4px 0; }
.controls input{
  padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
#q{ flex:1 }
#k{ width:72px }
.meta{ color:var(--muted); font-size:13px; margin-top:6px; }
.row{ display:grid; grid-template-columns:3rem 1fr 6rem; gap:10px; padding:8px 14px; border-top:1px solid var(--border); }
.mono{ font-family: ui-monospace, SFMono-Regular, Menlo, Monaco, Consolas, monospace }
.empty{ padding:12px; color:var(--muted); }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Word search</h1>
      <div class="controls">
        <input id="q" type="text" placeholder="Type a prefix…" autocomplete="off" autofocus />
        <input id="k" type="number" min="1" max="50" value="10" class="mono" />
      </div>
      <div id="stats" class="meta">Ready. <kbd>Tab</kbd> accepts the top completion, <kbd>Enter</kbd> lists locations.</div>
      <h2>Completions</h2><div id="exact" class="empty">Start typing to see results.</div>
      <h2>Fuzzy completions</h2><div id="fuzzy" class="empty"></div>
      <h2>Locations</h2><div id="loc" class="empty"></div>
    </div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
const q = $("#q"), k = $("#k"), stats = $("#stats");
let t, best = "";
const esc = (s) => String(s).replace(/[&<>"']/g, (c) => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;","'":"&#39;"}[c]));

function rows(el, data){
  if(!data.results || data.results.length === 0){
    el.className = "empty"; el.textContent = "No matches."; return;
  }
  el.className = "";
  el.innerHTML = data.results.map((r,i)=>
    `<div class="row"><div>${i+1}</div><div class="mono">${esc(r.text)}</div><div>${r.frequency}</div></div>`
  ).join("");
}

async function getJSON(url){
  const resp = await fetch(url);
  if(!resp.ok) throw new Error(`HTTP ${resp.status}`);
  return resp.json();
}

async function search(){
  const query = q.value;
  const topk = Math.max(1, Math.min(50, parseInt(k.value || "10", 10)));
  if(!query){ $("#exact").textContent = "Start typing to see results."; $("#fuzzy").textContent = ""; best = ""; return; }
  try{
    const exact = await getJSON(`/api/complete?q=${encodeURIComponent(query)}&k=${topk}`);
    rows($("#exact"), exact);
    best = exact.results.length ? exact.results[0].text : "";
    const fuzzy = await getJSON(`/api/fuzzy?q=${encodeURIComponent(query)}&k=${topk}`);
    rows($("#fuzzy"), fuzzy);
    stats.textContent = `${exact.total_candidates} completions • ${fuzzy.total_candidates} fuzzy • ~${((exact.elapsed + fuzzy.elapsed)*1000).toFixed(1)} ms`;
  }catch(e){
    stats.textContent = `Error: ${e.message ?? e}`;
  }
}

async function locations(){
  const data = await getJSON(`/api/lookup?w=${encodeURIComponent(q.value)}`);
  const el = $("#loc");
  if(!data.found){ el.className = "empty"; el.textContent = `No matches of '${data.word}' found.`; return; }
  el.className = "";
  el.innerHTML = data.locations.map((o,i)=>`<div class="row"><div>${i}</div><div class="mono">line ${o.line}, word ${o.word}</div><div></div></div>`).join("");
}

q.addEventListener("input", ()=>{ clearTimeout(t); t = setTimeout(search, 150); });
q.addEventListener("keydown", (ev)=>{
  if(ev.key === "Tab" && best){ ev.preventDefault(); q.value = best; search(); }
  else if(ev.key === "Enter"){ locations(); }
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("path", nargs="?", default=DEFAULT_FILE, help="Text file to index")
    ap.add_argument("--host", default="127.0.0.1")
    ap.add_argument("--port", type=int, default=8000)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    try:
        _engine.build(args.path, verbose=args.verbose)
    except FileNotFoundError:
        ap.error(f"cannot open {args.path!r}")

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
