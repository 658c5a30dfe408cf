INDEX_HTML = """<!doctype html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <meta name="viewport" content="width=device-width, initial-scale=1">
  <title>AI Movie Poster Generator</title>
  <style>
    body { font-family: system-ui, sans-serif; max-width: 64rem; margin: 0 auto; padding: 2rem 1rem; }
    h1 { text-align: center; }
    .lead { text-align: center; color: #666; }
    .grid { display: grid; grid-template-columns: repeat(auto-fit, minmax(20rem, 1fr)); gap: 2rem; }
    .card { border: 1px solid #ddd; border-radius: .5rem; padding: 1.5rem; }
    label { display: block; margin-top: 1rem; font-weight: 600; }
    input, select, button { width: 100%; padding: .5rem; margin-top: .25rem; box-sizing: border-box; }
    #poster img { max-width: 20rem; border-radius: .5rem; }
    #toast { position: fixed; bottom: 1rem; right: 1rem; padding: 1rem; border-radius: .5rem; background: #222; color: #fff; display: none; }
    .actions { display: flex; gap: 1rem; }
    [hidden] { display: none !important; }
  </style>
</head>
<body>
  <h1>AI Movie Poster Generator</h1>
  <p class="lead">Transform your favorite movies into unique artistic posters using AI.
    Simply enter a movie title and choose an art style to create something amazing.</p>

  <details class="card">
    <summary id="key-summary">Enter API Key</summary>
    <label for="apiKey">API Key</label>
    <input id="apiKey" type="password" placeholder="sk-..." autocomplete="off">
    <p>Don't have an API key? Get one from
      <a href="https://platform.openai.com/api-keys" target="_blank" rel="noopener noreferrer">OpenAI's website</a></p>
  </details>

  <div class="grid">
    <form id="poster-form" class="card">
      <h2>Create Your Poster</h2>
      <label for="title">Movie Title</label>
      <input id="title" type="text" placeholder="Enter a movie title" required>
      <label for="style">Art Style</label>
      <select id="style" required><option value="" disabled selected>Select an art style</option></select>
      <label for="model">AI Model</label>
      <select id="model" required></select>
      <button id="submit" type="submit" style="margin-top: 1.5rem">Generate Poster</button>
    </form>

    <div class="card">
      <h2>Your Poster</h2>
      <p id="caption">Your generated poster will appear here</p>
      <div id="poster"><p>Fill out the form to generate your poster</p></div>
      <div class="actions" id="actions" hidden>
        <a id="download" href="/api/poster/download"><button type="button">Download</button></a>
        <button id="share" type="button" hidden>Share</button>
      </div>
    </div>
  </div>

  <div id="toast"></div>

<script>
const $ = (id) => document.getElementById(id);

function toast(n) {
  if (!n) return;
  $("toast").textContent = n.title + " " + n.description;
  $("toast").style.display = "block";
  setTimeout(() => { $("toast").style.display = "none"; }, 4000);
}

function render(status) {
  $("key-summary").textContent = status.has_credential ? "Update API Key" : "Enter API Key";
  $("submit").disabled = status.busy;
  $("submit").textContent = status.busy ? "Generating..." : "Generate Poster";
  $("caption").textContent = status.caption;
  if (status.busy) {
    $("poster").innerHTML = "<p>Creating your masterpiece...</p>";
  } else if (status.image_url) {
    const img = document.createElement("img");
    img.src = status.image_url;
    img.alt = "Generated movie poster for " + status.title;
    $("poster").replaceChildren(img);
  } else {
    $("poster").innerHTML = "<p>Fill out the form to generate your poster</p>";
  }
  $("actions").hidden = !status.image_url || status.busy;
  $("share").hidden = !status.can_share;
}

async function put(path, body) {
  const r = await fetch(path, { method: "PUT", headers: { "Content-Type": "application/json" }, body: JSON.stringify(body) });
  return r.json();
}

async function init() {
  const options = await (await fetch("/api/options")).json();
  for (const s of options.art_styles) $("style").add(new Option(s.label, s.value));
  for (const m of options.models) $("model").add(new Option(m.label, m.value));
  const status = await (await fetch("/api/poster")).json();
  $("title").value = status.title;
  if (status.style) $("style").value = status.style;
  $("model").value = status.model;
  render(status);
}

$("apiKey").addEventListener("change", (e) => put("/api/poster/credential", { api_key: e.target.value }).then(render));
for (const field of ["title", "style", "model"]) {
  $(field).addEventListener("change", (e) => put("/api/poster/fields", { field, value: e.target.value }).then(render));
}

$("poster-form").addEventListener("submit", async (e) => {
  e.preventDefault();
  await put("/api/poster/fields", { field: "title", value: $("title").value });
  render({ ...(await (await fetch("/api/poster")).json()), busy: true });
  const r = await fetch("/api/poster/generate", { method: "POST" });
  let status;
  if (r.ok) {
    status = await r.json();
  } else {
    const body = await r.json().catch(() => ({}));
    status = body.poster || await (await fetch("/api/poster")).json();
  }
  render(status);
  if (r.status !== 409) toast(status.notification);
});

$("share").addEventListener("click", () => fetch("/api/poster/share", { method: "POST" }));

init();
</script>
</body>
</html>
"""
