GOOD_TITLE = "Best Practices for Technical SEO in 2026"
GOOD_DESCRIPTION = ("Learn how to audit on-page SEO signals. " * 4).strip()

GOOD_HTML = f"""
<html>
<head>
  <title>{GOOD_TITLE}</title>
  <meta name="description" content="{GOOD_DESCRIPTION}">
</head>
<body>
  <h1>Technical SEO</h1>
  <h2>Crawling</h2>
  <p>Search engines crawl pages and follow links.</p>
  <a href="/guide">Guide</a>
  <a href="https://example.org/ref">Reference</a>
</body>
</html>
"""

# title 1文字 / meta なし / 画像なし / 見出しなし
BARE_HTML = "<title>A</title>"

# title 長すぎ / meta 長すぎ / alt 欠落 2 / h1 が 2 つ
NOISY_HTML = f"""
<html>
<head>
  <title>{"Very long title " * 5}</title>
  <meta name="description" content="{"d" * 200}">
</head>
<body>
  <h1>One</h1>
  <h1>Two</h1>
  <img src="a.png">
  <img src="b.png" alt="">
  <img src="c.png" alt="Chart">
</body>
</html>
"""
