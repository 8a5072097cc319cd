import pytest


class FakeBackend:
    """Scripted engine: findings keyed by trimmed text, with handle accounting"""

    def __init__(self, findings=None, fail_document_at=None, fail_group_at=None, fail_message=False):
        self.findings = findings or {}
        self.fail_document_at = fail_document_at
        self.fail_group_at = fail_group_at
        self.fail_message = fail_message
        self.documents_created = 0
        self.groups_created = 0
        self.live_documents = 0
        self.live_groups = 0
        self.live_lint_sets = 0
        self.texts = []

    def create_document(self, text):
        self.documents_created += 1
        if self.documents_created == self.fail_document_at:
            return None
        self.texts.append(text)
        self.live_documents += 1
        return {"text": text}

    def create_lint_group(self):
        self.groups_created += 1
        if self.groups_created == self.fail_group_at:
            return None
        self.live_groups += 1
        return {"group": self.groups_created}

    def get_lints(self, document, group):
        spans = self.findings.get(document["text"])
        if spans is None:
            return None
        self.live_lint_sets += 1
        return [{"start": s, "end": e, "message": m} for s, e, m in spans]

    def get_lint_message(self, lint):
        if self.fail_message:
            raise RuntimeError("engine crashed")
        return lint["message"]

    def get_lint_start(self, lint):
        return lint["start"]

    def get_lint_end(self, lint):
        return lint["end"]

    def free_lints(self, lints):
        self.live_lint_sets -= 1

    def free_lint_group(self, group):
        self.live_groups -= 1

    def free_document(self, document):
        self.live_documents -= 1

    def lib_version(self):
        return "9.9.9"

    def core_version(self):
        return "8.8.8"

    @property
    def all_released(self):
        return self.live_documents == 0 and self.live_groups == 0 and self.live_lint_sets == 0


DONT_FINDING = {"She dont like apples": [(4, 8, "subject-verb agreement")]}


@pytest.fixture
def make_backend():
    def _make(**kwargs):
        return FakeBackend(**kwargs)

    return _make


@pytest.fixture
def dont_backend():
    return FakeBackend(findings=DONT_FINDING)
