"""Proof-image upload to an HTTP object store."""
import secrets
import time

import requests
from flask import current_app

from app.errors import UploadFailed
from app.utils import file_extension


class HttpObjectStore:
    """
    Stores uploaded proof images and hands back a public URL.

    Objects are written with a PUT to ``<upload_url>/<key>``. If the store
    answers with JSON containing ``url`` that link is used, otherwise the link
    is built from ``public_url``.
    """

    def __init__(self, upload_url, public_url=None, api_key=None, prefix='volunteer-proofs', timeout=30):
        self.upload_url = (upload_url or '').rstrip('/')
        self.public_url = (public_url or self.upload_url).rstrip('/')
        self.api_key = api_key
        self.prefix = prefix.strip('/') if prefix else ''
        self.timeout = timeout

    @classmethod
    def from_config(cls, config):
        return cls(
            config.get('STORAGE_UPLOAD_URL'),
            public_url=config.get('STORAGE_PUBLIC_URL'),
            api_key=config.get('STORAGE_API_KEY'),
            prefix=config.get('STORAGE_PREFIX', 'volunteer-proofs'),
            timeout=config.get('STORAGE_TIMEOUT', 30),
        )

    def make_key(self, suggested_name):
        # volunteer-proofs/1718000000000-AbCd3fGh.jpg
        name = f"{int(time.time() * 1000)}-{secrets.token_urlsafe(6)}.{file_extension(suggested_name)}"
        return f"{self.prefix}/{name}" if self.prefix else name

    def upload(self, data, mime_type, suggested_name):
        if not self.upload_url:
            raise UploadFailed('Image storage is not configured.')

        key = self.make_key(suggested_name)
        headers = {'Content-Type': mime_type or 'application/octet-stream'}
        if self.api_key:
            headers['Authorization'] = f"Bearer {self.api_key}"

        try:
            response = requests.put(f"{self.upload_url}/{key}", data=data, headers=headers, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            current_app.logger.error(f"Error uploading {key} to storage: {e}")
            raise UploadFailed() from e

        url = None
        try:
            payload = response.json()
            if isinstance(payload, dict):
                url = payload.get('url')
        except ValueError:
            pass
        return url or f"{self.public_url}/{key}"

    __call__ = upload
