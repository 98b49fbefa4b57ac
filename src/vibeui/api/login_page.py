"""Login page markup.

The page is a single self-contained HTML document; it is rendered with
string formatting rather than a template engine because its only dynamic
part is the optional error banner.
"""

from __future__ import annotations

import html

_ERROR_BANNER = '<div class="error">{message}</div>'

_LOGIN_PAGE = """<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>VibeUI — Login</title>
<link href="https://fonts.googleapis.com/css2?family=Plus+Jakarta+Sans:wght@400;500;600;700&display=swap" rel="stylesheet">
<style>
*, *::before, *::after {{ box-sizing: border-box; margin: 0; padding: 0; }}
body {{
  font-family: 'Plus Jakarta Sans', sans-serif;
  background: #0c0c0f;
  color: #f0f0f5;
  min-height: 100vh;
  display: flex;
  align-items: center;
  justify-content: center;
}}
.box {{
  background: #14141a;
  border: 1px solid #2a2a35;
  border-radius: 16px;
  padding: 40px 36px;
  width: 100%;
  max-width: 380px;
}}
.logo {{ font-size: 24px; font-weight: 700; margin-bottom: 4px; }}
.logo span {{ color: #7c6fff; }}
.subtitle {{ font-size: 13px; color: #7070a0; margin-bottom: 32px; }}
label {{ font-size: 12px; font-weight: 600; color: #7070a0; display: block; margin-bottom: 6px; }}
input {{
  width: 100%; padding: 10px 14px;
  background: #1c1c24; border: 1px solid #2a2a35;
  border-radius: 8px; color: #f0f0f5; font-size: 14px;
  font-family: inherit; outline: none; margin-bottom: 16px;
}}
input:focus {{ border-color: #7c6fff; }}
.btn {{
  width: 100%; padding: 11px;
  background: #7c6fff; color: white;
  border: none; border-radius: 8px;
  font-size: 14px; font-weight: 600;
  font-family: inherit; cursor: pointer;
}}
.btn:hover {{ background: #9080ff; }}
.error {{
  background: rgba(239,68,68,0.1);
  border: 1px solid rgba(239,68,68,0.3);
  color: #ef4444; font-size: 13px;
  padding: 10px 12px; border-radius: 8px;
  margin-bottom: 16px;
}}
</style>
</head>
<body>
<div class="box">
  <div class="logo">Vibe<span>UI</span></div>
  <div class="subtitle">Build a design system. Preview it. Ship.</div>
  {error}
  <form method="POST" action="/login">
    <label>Username</label>
    <input type="text" name="username" autofocus autocomplete="username" placeholder="Enter username">
    <label>Password</label>
    <input type="password" name="password" autocomplete="current-password" placeholder="Enter password">
    <button class="btn" type="submit">Sign in →</button>
  </form>
</div>
</body>
</html>"""


def render_login_page(error: str = "") -> str:
    """Return the login page, with *error* shown above the form if given."""
    banner = _ERROR_BANNER.format(message=html.escape(error)) if error else ""
    return _LOGIN_PAGE.format(error=banner)
