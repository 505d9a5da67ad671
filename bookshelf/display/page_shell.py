"""Static HTML shell of the reading tracker page: lists, placeholders and CSS."""

PAGE_STYLE = """\
      :root {
        --c-bg: #faf7f2; --c-surface: #ffffff; --c-border: #e4ddd1;
        --c-text: #2b2622; --c-muted: #7a7067; --c-accent: #b5651d;
        --c-reading: #2f7d5b; --c-next: #3c6ea8; --c-finished: #8a5a9e;
        --c-error: #b3261e;
      }
      body { margin: 0; background: var(--c-bg); color: var(--c-text);
             font-family: system-ui, -apple-system, "Segoe UI", sans-serif; }
      .shelf { max-width: 960px; margin: 0 auto; padding: 1.5rem 1rem 3rem; }
      .status-message { color: var(--c-muted); font-size: 0.9rem; }
      .status-message.is-error { color: var(--c-error); font-weight: 600; }
      .shelf-section h2 { font-size: 1.2rem; margin: 2rem 0 0.75rem; }
      .book-list { list-style: none; margin: 0; padding: 0;
                   display: grid; gap: 0.75rem;
                   grid-template-columns: repeat(auto-fill, minmax(260px, 1fr)); }
      .empty-message { color: var(--c-muted); font-style: italic; }
      .book-card { background: var(--c-surface); border: 1px solid var(--c-border);
                   border-left-width: 4px; border-radius: 8px; padding: 0.75rem; }
      .book-card--reading { border-left-color: var(--c-reading); }
      .book-card--next { border-left-color: var(--c-next); }
      .book-card--finished { border-left-color: var(--c-finished); }
      .book-card-body { display: flex; gap: 0.75rem; }
      .book-cover img { width: 64px; height: auto; border-radius: 4px; }
      .book-title { font-size: 1rem; margin: 0 0 0.25rem; }
      .book-meta { display: flex; flex-wrap: wrap; gap: 0.25rem 0.5rem;
                   margin: 0; color: var(--c-muted); font-size: 0.85rem; }
      .book-meta-links { display: inline-flex; gap: 0.35rem; }
      .book-meta-link { color: var(--c-accent); text-decoration: none; }
      .book-meta-link-label { position: absolute; width: 1px; height: 1px;
                              overflow: hidden; clip: rect(0 0 0 0); }
      .book-rating { margin-top: 0.35rem; letter-spacing: 0.1em; color: var(--c-border); }
      .rating-star.is-filled { color: var(--c-accent); }
      [hidden] { display: none !important; }
"""

PAGE_SHELL = f"""\
<!DOCTYPE html>
<html lang="pl">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Moja półka</title>
    <style>
{PAGE_STYLE}    </style>
  </head>
  <body>
    <main class="shelf">
      <header class="shelf-header">
        <h1 class="shelf-title">Moja półka</h1>
        <p id="status-message" class="status-message" role="status" hidden></p>
      </header>
      <section class="shelf-section" aria-labelledby="reading-heading">
        <h2 id="reading-heading">Czytam teraz</h2>
        <ul id="reading-list" class="book-list"></ul>
        <p class="empty-message" data-for="reading-list" hidden>Nic teraz nie czytam.</p>
      </section>
      <section class="shelf-section" aria-labelledby="next-heading">
        <h2 id="next-heading">Planuję przeczytać</h2>
        <ul id="next-list" class="book-list"></ul>
        <p class="empty-message" data-for="next-list" hidden>Lista planów jest pusta.</p>
      </section>
      <section class="shelf-section" aria-labelledby="finished-heading">
        <h2 id="finished-heading">Przeczytane</h2>
        <ul id="finished-list" class="book-list"></ul>
        <p class="empty-message" data-for="finished-list" hidden>Brak przeczytanych książek.</p>
      </section>
    </main>
  </body>
</html>
"""
