from fastapi import APIRouter
from fastapi.responses import HTMLResponse


router = APIRouter(tags=["homepage"])

HOMEPAGE_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>URL Shortener</title>
  <style>
    body { font-family: sans-serif; max-width: 40rem; margin: 4rem auto; padding: 0 1rem; }
    input { width: 100%; padding: .5rem; margin: .25rem 0 1rem; box-sizing: border-box; }
    button { padding: .5rem 1.5rem; }
    #result { margin-top: 1.5rem; word-break: break-all; }
  </style>
</head>
<body>
  <h1>URL Shortener</h1>
  <form id="shorten-form">
    <label for="url">Long URL</label>
    <input id="url" name="url" type="url" placeholder="https://example.com/some/long/path" required>
    <label for="custom_id">Custom id (optional)</label>
    <input id="custom_id" name="custom_id" type="text" pattern="[A-Za-z0-9_-]+">
    <button type="submit">Shorten</button>
  </form>
  <p id="result"></p>
  <script>
    document.getElementById("shorten-form").addEventListener("submit", async (event) => {
      event.preventDefault();
      const body = { url: document.getElementById("url").value };
      const customId = document.getElementById("custom_id").value.trim();
      if (customId) body.custom_id = customId;
      const response = await fetch("/shorten", {
        method: "POST",
        headers: { "Content-Type": "application/json" },
        body: JSON.stringify(body),
      });
      const result = document.getElementById("result");
      if (response.ok) {
        const data = await response.json();
        result.innerHTML = `<a href="${data.url}">${data.url}</a>`;
      } else if (response.status === 409) {
        result.textContent = "That id is already taken.";
      } else if (response.status === 400) {
        result.textContent = "Please enter a valid absolute URL.";
      } else {
        result.textContent = "Something went wrong, try again later.";
      }
    });
  </script>
</body>
</html>
"""


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def homepage():
    """Serve the static homepage"""
    return HTMLResponse(content=HOMEPAGE_HTML)
