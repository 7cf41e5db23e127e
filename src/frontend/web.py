from __future__ import annotations
import argparse
import dataclasses
from flask import Flask, request, jsonify, Response
from wordrank import FileIndex, RankType
from wordrank.config import DEFAULT_HOST, DEFAULT_PORT
from wordrank.errors import UnknownFileError

app = Flask(__name__)
_index: FileIndex | None = None


def _error(message: str, status: int):
    return jsonify({"error": message}), status


class _BadRequest(Exception):
    pass


def _require(name: str) -> str:
    value = request.args.get(name, "", type=str)
    if not value:
        raise _BadRequest(f"missing query parameter: {name}")
    return value


@app.errorhandler(_BadRequest)
def _on_bad_request(exc: _BadRequest):
    return _error(str(exc), 400)


@app.errorhandler(UnknownFileError)
def _on_unknown_file(exc: UnknownFileError):
    return _error(str(exc), 404)


# aggregates over an index with no readable files
@app.errorhandler(ValueError)
def _on_empty_index(exc: ValueError):
    return _error(str(exc), 409)


@app.before_request
def _check_ready():
    if request.path.startswith("/api/") and (_index is None or not _index.is_built):
        return _error("index not built", 503)


# ---------- API ----------
@app.get("/health")
def health():
    ready = _index is not None and _index.is_built
    return jsonify({"ok": True, "ready": ready})


@app.get("/api/count")
def api_count():
    f, w = _require("file"), _require("word")
    return jsonify({"file": f, "word": w, "count": _index.count_in_file(f, w)})  # type: ignore


@app.get("/api/rank")
def api_rank():
    f, w = _require("file"), _require("word")
    return jsonify({"file": f, "word": w, "rank": _index.rank_in_file(f, w)})  # type: ignore


@app.get("/api/average")
def api_average():
    w = _require("word")
    return jsonify({"word": w, "average": _index.average_rank(w)})  # type: ignore


@app.get("/api/words")
def api_words():
    k = request.args.get("k", type=int)
    if k is None:
        raise _BadRequest("query parameter k must be an integer")
    kind = request.args.get("kind", RankType.AVERAGE.value, type=str)
    try:
        kind = RankType(kind)
    except ValueError:
        raise _BadRequest(f"kind must be one of: {', '.join(t.value for t in RankType)}")
    return jsonify({"k": k, "kind": kind.value, "words": _index.words_with_rank_below(k, kind)})  # type: ignore


@app.get("/api/report")
def api_report():
    w = _require("word")
    return jsonify(dataclasses.asdict(_index.report(w)))  # type: ignore


@app.get("/api/files")
def api_files():
    return jsonify(_index.filenames())  # type: ignore


# ---------- UI ----------
@app.get("/")
def home():
    # A tiny page: minimal CSS + JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Word Rank • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial; }
.container{ max-width:880px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0; }
form{ display:flex; gap:12px; flex-wrap:wrap; margin:12px 0; }
input{ flex:1; min-width:200px; padding:10px 12px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); font-size:15px; outline:none; }
input:focus{ border-color:var(--accent) }
button{ padding:10px 14px; border-radius:10px; border:1px solid var(--border); background:#0b1117;
  color:var(--ink); cursor:pointer; }
table{ width:100%; border-collapse:collapse; margin-top:12px; }
td,th{ padding:8px 10px; border-top:1px solid var(--border); text-align:left; }
th{ color:var(--muted); font-weight:600 }
.meta{ color:var(--muted); font-size:13px }
.err{ color:#ffb0b0 }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Word Rank</h1>
      <form id="f">
        <input id="word" type="text" placeholder="Word…" autocomplete="off" autofocus />
        <button type="submit">Look up</button>
      </form>
      <div id="meta" class="meta">Ready.</div>
      <div id="out"></div>
    </div>
  </div>
<script>
const $ = (sel) => document.querySelector(sel);
function esc(s){ return String(s).replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
$("#f").addEventListener("submit", async (ev) => {
  ev.preventDefault();
  const w = $("#word").value.trim();
  if(!w) return;
  try{
    const resp = await fetch(`/api/report?word=${encodeURIComponent(w)}`);
    const r = await resp.json();
    if(!resp.ok) throw new Error(r.error || `HTTP ${resp.status}`);
    $("#meta").textContent = `${r.word}${r.known ? "" : " (not in corpus)"} • average ${r.average} • min ${r.min} • max ${r.max}`;
    $("#out").innerHTML = "<table><tr><th>File</th><th>Count</th><th>Rank</th></tr>" +
      Object.keys(r.ranks).map(f => `<tr><td>${esc(f)}</td><td>${r.counts[f]}</td><td>${r.ranks[f]}</td></tr>`).join("") +
      "</table>";
  }catch(e){
    $("#meta").innerHTML = `<span class="err">Error: ${esc(e.message ?? e)}</span>`;
    $("#out").innerHTML = "";
  }
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of FileIndex")
    ap.add_argument("root", help="Folder whose files make up the corpus")
    ap.add_argument("--host", default=DEFAULT_HOST)
    ap.add_argument("--port", type=int, default=DEFAULT_PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _index
    _index = FileIndex()
    _index.index_directory(args.root, verbose=args.verbose)

    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
