"""
Shared test fixtures: in-memory files and a scriptable external generator.
"""

import pytest

from featuregen.codegen import (
    GeneratorServices,
    ProjectSettings,
    TestGenerator,
    TestGeneratorResult,
    Version,
)


class RecordingTestGenerator(TestGenerator):
    """Returns a canned result or raises, and records every call."""

    def __init__(self, result=None, exception=None):
        self.result = result or TestGeneratorResult.succeeded("// generated\n")
        self.exception = exception
        self.inputs = []
        self.settings = []
        self.closed = False

    def generate_test_file(self, feature_file_input, settings):
        self.inputs.append(feature_file_input)
        self.settings.append(settings)
        if self.exception is not None:
            raise self.exception
        return self.result

    def close(self):
        self.closed = True


class FakeServices(GeneratorServices):
    def __init__(self, settings, version, test_generator):
        self.settings = settings
        self.version = version
        self.test_generator = test_generator
        self.version_queries = 0
        self.generators_created = 0

    def get_project_settings(self):
        return self.settings

    def get_generator_version(self):
        self.version_queries += 1
        return self.version

    def create_test_generator(self):
        self.generators_created += 1
        return self.test_generator


class MemoryFiles:
    """Reader and writer backed by a dict."""

    def __init__(self, files=None):
        self.files = dict(files or {})
        self.reads = []
        self.writes = []

    def read(self, path):
        self.reads.append(path)
        return self.files[path]

    def write(self, path, content):
        self.writes.append((path, content))
        self.files[path] = content


@pytest.fixture
def project_folder(tmp_path):
    """Return a temporary project folder as a string."""
    folder = tmp_path / "Bookshop"
    folder.mkdir()
    return str(folder)


@pytest.fixture
def test_generator():
    return RecordingTestGenerator()


@pytest.fixture
def make_services(project_folder, test_generator):
    """Factory for fake services; defaults to a C# project on generator 3.9.1."""

    def _make(language="csharp", version=Version(3, 9, 1), generator=None):
        return FakeServices(
            ProjectSettings(project_folder=project_folder, language=language),
            version,
            generator or test_generator,
        )

    return _make


@pytest.fixture
def memory_files():
    return MemoryFiles({"Features/Login.feature": "Feature: Login\n"})


@pytest.fixture
def empty_files():
    return MemoryFiles()
