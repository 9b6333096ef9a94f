#!/usr/bin/env python3
"""
Wipeable Secret Storage
=======================
Generated passwords are held in a mutable ``bytearray`` so the bytes can be
zeroed once the caller is done with them.

Any ``str`` obtained through :meth:`SecretValue.reveal` is an ordinary
immutable Python string and cannot be wiped; keep such copies short-lived.
"""


class SecretValue:

    """Mutable UTF-8 buffer that is zeroed on wipe(), on exit and in the deleter."""

    def __init__(self, text: str):
        self._data = bytearray(text.encode('utf-8'))
        self._length = len(text)
        self._wiped = False

    def reveal(self) -> str:
        if self._wiped:
            raise ValueError("secret has been wiped")
        return self._data.decode('utf-8')

    @property
    def wiped(self) -> bool:
        return self._wiped

    def wipe(self):
        for i in range(len(self._data)):
            self._data[i] = 0
        self._wiped = True

    def __len__(self):
        return self._length

    def __bytes__(self):
        return bytes(self._data)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.wipe()

    def __del__(self):
        # The buffer may already be gone during interpreter shutdown
        data = getattr(self, '_data', None)
        if data is not None:
            self.wipe()

    def __repr__(self):
        state = 'wiped' if self._wiped else f'{self._length} chars'
        return f'<SecretValue {state}>'


__all__ = ["SecretValue"]
