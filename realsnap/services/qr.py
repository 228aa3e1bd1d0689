"""
QR rendering for verification links: an inline data URL for the result page
and a PNG file per record that can be fetched separately.
"""

import base64
import io
import os
import tempfile
import qrcode


class QrRenderer:
    def __init__(self, output_dir, box_size=8, border=4):
        self.output_dir = os.path.abspath(output_dir)
        self.box_size = box_size
        self.border = border

    def png_bytes(self, data):
        qr = qrcode.QRCode(box_size=self.box_size, border=self.border)
        qr.add_data(data)
        qr.make(fit=True)
        buffer = io.BytesIO()
        qr.make_image().save(buffer)
        return buffer.getvalue()

    def data_url(self, data):
        encoded = base64.b64encode(self.png_bytes(data)).decode("ascii")
        return f"data:image/png;base64,{encoded}"

    def png_name(self, record_id):
        return f"{record_id}.png"

    def write_png(self, record_id, data):
        os.makedirs(self.output_dir, exist_ok=True)
        target = os.path.join(self.output_dir, self.png_name(record_id))
        fd, tmp_path = tempfile.mkstemp(dir=self.output_dir, prefix=".qr-", suffix=".tmp")
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(self.png_bytes(data))
            os.replace(tmp_path, target)
        except BaseException:
            if os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise
        return target
