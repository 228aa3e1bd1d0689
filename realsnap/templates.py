"""
Page templates rendered with render_template_string (autoescaped).
"""

_LAYOUT_HEAD = """<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8">
<meta name="viewport" content="width=device-width, initial-scale=1">
<title>RealSnap</title>
<style>
  body { font-family: system-ui, -apple-system, Segoe UI, Roboto, sans-serif; max-width: 720px; margin: 32px auto; padding: 0 16px; }
  code { word-break: break-all; }
  img.original { max-width: 600px; width: 100%; border: 1px solid #ddd; }
</style>
</head>
<body>
"""

_LAYOUT_FOOT = """
</body>
</html>"""

INDEX_HTML = _LAYOUT_HEAD + """
<h2>RealSnap</h2>
<p>Upload an image to get a verification link and QR code.</p>
<form action="{{ url_for('upload.upload') }}" method="post" enctype="multipart/form-data">
  <input type="file" name="file" accept="image/*" required />
  <button type="submit">Upload</button>
</form>
""" + _LAYOUT_FOOT

UPLOAD_OK_HTML = _LAYOUT_HEAD + """
<h2>Upload recorded</h2>
<p><b>Verification link:</b> <a href="{{ record.verify_ref }}" target="_blank">{{ record.verify_ref }}</a></p>
<p><b>SHA-256:</b> <code>{{ record.integrity_hash }}</code></p>
<p><b>QR code:</b></p>
<img src="{{ qr_data_url }}" alt="QR code for {{ record.verify_ref }}" />
<p>PNG: <a href="{{ qr_png_url }}" target="_blank">{{ qr_png_url }}</a></p>
<p>Original file: <a href="{{ content_url }}" target="_blank">{{ content_url }}</a></p>
<p><a href="{{ url_for('upload.index') }}">Back</a></p>
""" + _LAYOUT_FOOT

VERIFIED_HTML = _LAYOUT_HEAD + """
<h2>Verified by RealSnap</h2>
<p><b>ID:</b> <code>{{ view.record.record_id }}</code></p>
<p><b>SHA-256:</b> <code>{{ view.record.integrity_hash }}</code></p>
<p><b>Recorded at:</b> {{ view.record.created_at }}</p>
<p><b>Stored original:</b></p>
<img class="original" src="{{ view.content_url }}" alt="Original upload" />
<p><a href="{{ view.content_url }}" target="_blank">Open the original</a></p>
""" + _LAYOUT_FOOT

NOT_FOUND_HTML = _LAYOUT_HEAD + """
<h2>Not found</h2>
<p>No original is recorded for ID <code>{{ record_id }}</code>.</p>
""" + _LAYOUT_FOOT

ERROR_HTML = _LAYOUT_HEAD + """
<h2>Something went wrong</h2>
<p>{{ message }}</p>
<p><a href="{{ url_for('upload.index') }}">Back</a></p>
""" + _LAYOUT_FOOT
