import pytest


class FakeEmbedder:
    """Deterministic stand-in for the sentence-transformers Embedder."""

    dimension = 4

    def __init__(self, fail_on=None):
        self.calls = []
        self.fail_on = fail_on

    def embed(self, texts):
        self.calls.append(list(texts))
        out = []
        for t in texts:
            if t == self.fail_on:
                raise RuntimeError(f"model failed on {t!r}")
            out.append([float(len(t)), float(t.count(" ")), 1.0, 0.0])
        return out


@pytest.fixture
def fake_embedder():
    return FakeEmbedder()


@pytest.fixture
def write_csv(tmp_path):
    def _write(name, text):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return p
    return _write
