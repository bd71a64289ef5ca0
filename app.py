from __future__ import annotations
import logging
from typing import Optional

from flask import Flask, current_app, jsonify, request
from flask import render_template_string
from flask_cors import CORS
from langdetect import DetectorFactory
from langdetect import detect as lang_detect
from langdetect.lang_detect_exception import LangDetectException

from voice_shopping.config import configure_logging, get_settings
from voice_shopping.engine import CommandEngine
from voice_shopping.normalizer import normalize_name
from voice_shopping.session import RecognitionSession, SessionError
from voice_shopping.tables import ADD_KEYWORDS

logger = logging.getLogger(__name__)
DetectorFactory.seed = 0


def detect_lang(text: str) -> str:
    try:
        return lang_detect(text)
    except LangDetectException:
        return "en"


def create_app(engine: Optional[CommandEngine] = None) -> Flask:
    settings = get_settings()
    app = Flask(__name__)
    CORS(app, origins=settings.cors_origin_list())
    app.extensions["engine"] = engine or CommandEngine.from_settings(settings)
    app.extensions["session"] = RecognitionSession()

    @app.route("/")
    def index():
        return render_template_string(INDEX_HTML)

    @app.post("/api/command")
    def api_command():
        data = request.get_json(silent=True) or {}
        text = (data.get("text") or "").lower()
        if not text.strip():
            return jsonify({"status": "error", "message": "Empty command"}), 400
        lang = detect_lang(text)
        if not lang.startswith("en"):
            logger.warning("Transcript %r detected as %s; only English commands are understood", text, lang)
        eng = current_app.extensions["engine"]
        outcome = eng.interpret(text)
        return jsonify({
            "status": "ok",
            "intent": outcome.kind,
            "outcome": outcome.to_dict(),
            "messages": outcome.messages(),
            "suggestions": getattr(outcome, "tips", []),
            "list": eng.store.to_dict(),
            "transcript": text,
            "lang": lang,
        })

    @app.get("/api/list")
    def api_list():
        return jsonify({"status": "ok", "list": current_app.extensions["engine"].store.to_dict()})

    @app.post("/api/list")
    def api_list_post():
        data = request.get_json(silent=True) or {}
        action = data.get("action")
        item = (data.get("item") or "").strip().lower()
        if not item:
            return jsonify({"status": "error", "message": "Missing item"}), 400
        try:
            qty = int(data.get("quantity") or 1)
        except (TypeError, ValueError, OverflowError):
            return jsonify({"status": "error", "message": "Quantity must be a number"}), 400
        store = current_app.extensions["engine"].store
        if action == "add":
            if qty < 1:
                return jsonify({"status": "error", "message": "Quantity must be positive"}), 400
            # same identity rule as spoken adds
            name = normalize_name(item, ADD_KEYWORDS)
            if not name:
                return jsonify({"status": "error", "message": "Missing item"}), 400
            store.add_or_merge(name, qty)
        elif action == "remove":
            store.remove(item)
        else:
            return jsonify({"status": "error", "message": "Unknown action"}), 400
        return jsonify({"status": "ok", "list": store.to_dict()})

    @app.post("/api/session")
    def api_session():
        data = request.get_json(silent=True) or {}
        session = current_app.extensions["session"]
        try:
            session.handle(data.get("event", ""), data.get("reason"))
        except SessionError as e:
            return jsonify({"status": "error", "message": str(e), "session": session.to_dict()}), 400
        return jsonify({"status": "ok", "session": session.to_dict()})

    @app.get("/api/debug")
    def api_debug():
        eng = current_app.extensions["engine"]
        return jsonify({
            "status": "ok",
            "session": current_app.extensions["session"].to_dict(),
            "items_in_list": len(eng.store),
            "number_word_match": eng.number_policy.name,
            "store_match": eng.store.policy.name,
            "strip_number_words": eng.strip_number_words,
            "user_agent": request.headers.get("User-Agent", ""),
        })

    return app


INDEX_HTML = r"""
<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8" />
  <meta name="viewport" content="width=device-width, initial-scale=1" />
  <title>Voice Shopping Assistant</title>
  <style>
    :root { --bg: #0b0f14; --card: #121825; --muted: #93a1b1; --text: #ecf0f1; --accent:#7c5cff; --accent2:#20c997; }
    * { box-sizing: border-box; }
    body { margin:0; font-family: system-ui, -apple-system, Segoe UI, Roboto, Helvetica, Arial, sans-serif; background: var(--bg); color: var(--text); }
    header { padding: 16px; display:flex; justify-content:space-between; align-items:center; background: linear-gradient(90deg, rgba(124,92,255,.2), rgba(32,201,151,.2)); border-bottom: 1px solid #1f2937; }
    h1 { margin:0; font-size: 20px; }
    main { padding: 16px; display:grid; grid-template-columns: 1fr; gap: 16px; max-width: 900px; margin: 0 auto; }
    .card { background: var(--card); border: 1px solid #1f2937; border-radius: 16px; padding: 16px; }
    button { background: var(--accent); color: white; border: none; border-radius: 999px; padding: 10px 16px; font-weight: 600; cursor: pointer; }
    button.active { box-shadow: 0 0 12px var(--accent2); }
    button.ghost { background: transparent; border:1px solid #334155; }
    .pill { background: #1f2937; padding: 4px 10px; border-radius: 999px; font-size: 12px; color: var(--muted); }
    .item { display:flex; justify-content: space-between; align-items: center; padding: 10px; background:#0e1420; border:1px solid #162033; border-radius: 12px; margin-bottom: 6px; }
    input { background:#0e1420; color:var(--text); border:1px solid #162033; border-radius: 10px; padding: 10px; width: 100%; }
    .result { padding:10px; background:#0e1420; border:1px solid #162033; border-radius:12px; margin-top:8px; }
    #transcript { color: var(--muted); }
  </style>
</head>
<body>
  <header>
    <h1>🛒 Voice Shopping Assistant</h1>
    <button id="micBtn">🎙️ Click to Speak</button>
  </header>
  <main>
    <section class="card">
      <div class="pill">Try: "Add 2 bananas", "Remove milk", "Find apples"</div>
      <p id="transcript">…</p>
      <input id="manual" placeholder="Or type a command and press Enter" />
    </section>
    <section class="card"><h3>Shopping List</h3><div id="list"></div></section>
    <section class="card"><h3>Results</h3><div id="results"></div></section>
    <section class="card"><h3>Smart Suggestions</h3><div id="suggestions"></div></section>
  </main>
  <script>
    const listEl = document.getElementById('list');
    const resultsEl = document.getElementById('results');
    const suggestionsEl = document.getElementById('suggestions');
    const transcriptEl = document.getElementById('transcript');
    const micBtn = document.getElementById('micBtn');
    const manual = document.getElementById('manual');

    function post(url, body){
      return fetch(url, {method:'POST', headers:{'Content-Type':'application/json'}, body: JSON.stringify(body)});
    }
    function renderCards(lines, container){
      lines.forEach(text => { const d = document.createElement('div'); d.className='result'; d.textContent = text; container.appendChild(d); });
    }
    function renderList(items){
      listEl.innerHTML = '';
      if(items.length === 0){ listEl.textContent = 'Your shopping list is empty.'; return; }
      items.forEach(it => {
        const row = document.createElement('div'); row.className='item';
        const left = document.createElement('span'); left.textContent = it.label;
        const rem = document.createElement('button'); rem.className='ghost'; rem.textContent='✕';
        rem.onclick = async () => { const r = await post('/api/list', {action:'remove', item: it.item}); renderList((await r.json()).list); };
        row.append(left, rem); listEl.appendChild(row);
      });
    }
    async function quickAdd(item){
      const r = await post('/api/list', {action:'add', item, quantity:1});
      renderList((await r.json()).list);
    }
    async function sendCommand(text){
      transcriptEl.textContent = `"${text}"`;
      const res = await post('/api/command', {text});
      const data = await res.json();
      if(data.status !== 'ok') return;
      renderList(data.list);
      if(data.messages.length){ resultsEl.innerHTML = ''; renderCards(data.messages, resultsEl); }
      if(data.intent === 'search' && !data.outcome.found){
        const btn = document.createElement('button'); btn.textContent = 'Add to List';
        btn.onclick = () => quickAdd(data.outcome.term);
        resultsEl.appendChild(btn);
      }
      if(data.intent === 'added'){ suggestionsEl.innerHTML = ''; renderCards(data.suggestions, suggestionsEl); }
    }

    const SR = window.SpeechRecognition || window.webkitSpeechRecognition;
    if(!SR){
      transcriptEl.textContent = 'SpeechRecognition not supported in this browser. Try Chrome or Edge.';
      micBtn.disabled = true;
    } else {
      const recog = new SR();
      recog.continuous = false; recog.lang = 'en-US'; recog.interimResults = false;
      micBtn.onclick = () => { micBtn.classList.add('active'); recog.start(); };
      recog.onstart = () => post('/api/session', {event:'start'});
      recog.onend = () => { micBtn.classList.remove('active'); post('/api/session', {event:'end'}); };
      recog.onerror = (e) => post('/api/session', {event:'error', reason: e.error || 'unknown'});
      recog.onresult = (e) => sendCommand(e.results[0][0].transcript.toLowerCase());
    }
    manual.addEventListener('keydown', (e) => {
      if(e.key === 'Enter'){ const text = manual.value.trim().toLowerCase(); if(!text) return; manual.value=''; sendCommand(text); }
    });
    fetch('/api/list').then(r => r.json()).then(d => renderList(d.list));
  </script>
</body>
</html>
"""

if __name__ == "__main__":
    configure_logging()
    settings = get_settings()
    # one utterance at a time: the list store is not guarded against overlapping calls
    create_app().run(host=settings.host, port=settings.port, debug=settings.debug, threaded=False)
