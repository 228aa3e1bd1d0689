from collections import namedtuple
from flask import current_app

Services = namedtuple("Services", ["content_store", "record_store", "issuer", "resolver", "qr"])


def get_services():
    return current_app.extensions["realsnap"]
