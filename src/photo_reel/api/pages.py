"""HTML rendering for the photo reel page."""

from html import escape

from photo_reel.domain.photos import Card


def render_card(card: Card) -> str:
    """Render one gallery card."""
    return (
        '<div class="photoCard">'
        f'<img src="{escape(card.image_src)}" alt="{escape(card.alt)}" />'
        f'<div class="caption">{escape(card.caption)}</div>'
        f'<div class="timestamp">{escape(card.timestamp)}</div>'
        "</div>"
    )


def render_gallery_page(cards: list[Card]) -> str:
    """Render the full page with the capture form, upload form and reel."""
    reel = "\n      ".join(render_card(card) for card in cards)
    return _PAGE_TEMPLATE.replace("{{reel}}", reel)


_PAGE_TEMPLATE = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Photo Reel</title>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 2rem; }
      form { margin-bottom: 1rem; }
      input { padding: 0.4rem 0.6rem; }
      button { padding: 0.4rem 0.8rem; }
      #photoReel { display: flex; overflow-x: auto; gap: 1rem; }
      .photoCard { flex: 0 0 auto; width: 240px; }
      .photoCard img { width: 100%; border-radius: 4px; }
      .caption { font-weight: 600; margin-top: 0.4rem; }
      .timestamp { color: #666; font-size: 0.85rem; }
      #notice { color: #b00020; }
    </style>
  </head>
  <body>
    <h1>Photo Reel</h1>
    <form id="captureForm">
      <input name="title" type="text" placeholder="Title" aria-label="Title" />
      <button type="submit">Capture</button>
    </form>
    <form id="uploadForm">
      <input name="title" type="text" placeholder="Title" aria-label="Title" />
      <input name="file" type="file" accept="image/*" />
      <button type="submit">Upload</button>
    </form>
    <p id="notice"></p>
    <div id="photoReel">
      {{reel}}
    </div>
    <script>
      async function submitFlow(form, path) {
        const notice = document.getElementById('notice');
        notice.textContent = '';
        const res = await fetch(path, { method: 'POST', body: new FormData(form) });
        const data = await res.json();
        if (data.status === 'failed') {
          notice.textContent = data.notice;
        } else if (data.status === 'published') {
          window.location.reload();
        }
      }
      document.getElementById('captureForm').addEventListener('submit', (event) => {
        event.preventDefault();
        submitFlow(event.target, '/photos/capture');
      });
      document.getElementById('uploadForm').addEventListener('submit', (event) => {
        event.preventDefault();
        submitFlow(event.target, '/photos/upload');
      });
    </script>
  </body>
</html>
"""
