"""
Single file generation of test code from a feature file.

``SingleFileGenerator`` is what an IDE calls every time a feature file is
saved. It checks that the project references a framework version the loaded
generator can produce code for, runs the generator and writes the companion
file. Whatever goes wrong with the content, the output file ends up holding
valid source in the project's language: the diagnostics are written as error
statements so they show up in the regular build error list.

Failures to reach the project services, read the input, render the
diagnostics or write the output are not rendered anywhere; they are only
reported through ``events.on_other_error`` and the call returns ``None``.
"""

import os
import traceback
from typing import Callable, Iterable, Optional

from ..logging_config import get_logger
from ..utils import read_text_file, write_text_file
from .registry import RendererRegistry, get_registry
from .core.compatibility import CompatibilityStatus, check_compatibility
from .core.config import GeneratorConfig
from .core.events import DiagnosticsChannel
from .core.generator import GenerationSettings, GeneratorServices, TestGeneratorResult
from .core.models import FeatureFileInput, GenerationError, ProjectInfo, ProjectSettings, Version
from .core.renderer import LanguageRenderer
from .core.templates import TemplateEngine, get_default_template_engine

logger = get_logger(__name__)

InputReader = Callable[[str], str]
OutputWriter = Callable[[str, str], None]
ServicesProvider = Callable[[], GeneratorServices]


class SingleFileGenerator:
    """Generates one output file per feature file for a single project.

    The instance holds no per-call state and can be reused for every save.

    Args:
        project_info: Project name and referenced framework version
        registry: Language renderers; the global registry by default
        config: Diagnostic texts and line ending
        template_engine: Templates for the dependency diagnostics
        reader: Reads input files; ``utils.read_text_file`` by default
        writer: Writes output files; ``utils.write_text_file`` by default
    """

    def __init__(
        self,
        project_info: ProjectInfo,
        registry: Optional[RendererRegistry] = None,
        config: Optional[GeneratorConfig] = None,
        template_engine: Optional[TemplateEngine] = None,
        reader: Optional[InputReader] = None,
        writer: Optional[OutputWriter] = None,
    ):
        self.project_info = project_info
        self.registry = registry if registry is not None else get_registry()
        self.config = config or GeneratorConfig()
        self.template_engine = template_engine or get_default_template_engine()
        self.reader = reader or read_text_file
        self.writer = writer or write_text_file
        self.events = DiagnosticsChannel()

    def generate_file(
        self,
        input_path: str,
        output_path: Optional[str],
        services_provider: ServicesProvider,
        input_reader: Optional[InputReader] = None,
        output_writer: Optional[OutputWriter] = None,
    ) -> Optional[str]:
        """
        Generate the companion file of a feature file.

        Args:
            input_path: Feature file path, absolute or relative to the project folder
            output_path: Output path; ``input_path`` plus the language extension if None
            services_provider: Called once to obtain the generator services
            input_reader: Overrides the instance reader for this call
            output_writer: Overrides the instance writer for this call

        Returns:
            The output path when a file was written (including diagnostic
            files), None on infrastructure failures
        """
        reader = input_reader or self.reader
        writer = output_writer or self.writer
        logger.debug("Generating %s for project '%s'", input_path, self.project_info.project_name)

        try:
            services = services_provider()
            project_settings = services.get_project_settings()
            renderer = self.registry.get_renderer(project_settings.language)

            if output_path is None:
                output_path = f"{input_path}{renderer.file_extension}"

            declared_version = self.project_info.referenced_version
            generator_version = (
                services.get_generator_version() if declared_version is not None else None
            )
            compatibility = check_compatibility(declared_version, generator_version)

            if compatibility.status is CompatibilityStatus.NO_DECLARED_DEPENDENCY:
                logger.warning(
                    "Project '%s' does not reference %s",
                    self.project_info.project_name,
                    self.config.framework_name,
                )
                return self._write_error_message(
                    output_path, writer, renderer, self._no_reference_message()
                )

            if compatibility.status is CompatibilityStatus.VERSION_MISMATCH:
                logger.warning(
                    "Generator %s does not match version %s referenced by '%s'",
                    compatibility.actual,
                    compatibility.declared,
                    self.project_info.project_name,
                )
                return self._write_error_message(
                    output_path,
                    writer,
                    renderer,
                    self._version_conflict_message(compatibility.actual),
                )
        except Exception as ex:
            self._report_other_error(ex, "Could not prepare generation of %s", input_path)
            return None

        try:
            input_content = reader(input_path)
        except Exception as ex:
            self._report_other_error(ex, "Could not read %s", input_path)
            return None

        try:
            output_content = self._generate(
                input_path, input_content, services, renderer, project_settings
            )
        except Exception as ex:
            self._report_other_error(ex, "Could not render diagnostics for %s", input_path)
            return None

        try:
            writer(output_path, output_content)
        except Exception as ex:
            self._report_other_error(ex, "Could not write %s", output_path)
            return None

        logger.debug("Wrote %s", output_path)
        return output_path

    def _generate(
        self,
        input_path: str,
        input_content: str,
        services: GeneratorServices,
        renderer: LanguageRenderer,
        project_settings: ProjectSettings,
    ) -> str:
        try:
            result = self._generate_code(input_path, input_content, services, project_settings)
            if result.success:
                return result.generated_test_code or ""
            errors = list(result.errors)
        except Exception as ex:
            return self._render_exception(ex, renderer, input_path)

        return self._render_generation_errors(errors, renderer)

    def _generate_code(
        self,
        input_path: str,
        input_content: str,
        services: GeneratorServices,
        project_settings: ProjectSettings,
    ) -> TestGeneratorResult:
        with services.create_test_generator() as test_generator:
            project_folder = os.path.abspath(project_settings.project_folder)
            full_path = os.path.normpath(os.path.join(project_folder, str(input_path)))
            feature_file_input = FeatureFileInput(
                project_relative_path=os.path.relpath(full_path, project_folder),
                content=input_content,
            )
            return test_generator.generate_test_file(feature_file_input, GenerationSettings())

    def _render_generation_errors(
        self, errors: Iterable[GenerationError], renderer: LanguageRenderer
    ) -> str:
        errors = list(errors)
        logger.warning("Generation reported %d error(s)", len(errors))

        # Events fire only once every error has rendered.
        line_ending = self.config.line_ending
        content = line_ending.join(
            [renderer.render_error_lines(error.message, line_ending) for error in errors]
        )

        for error in errors:
            self.events.emit_generation_error(error)
        return content

    def _render_exception(
        self, ex: BaseException, renderer: LanguageRenderer, input_path: str
    ) -> str:
        error = GenerationError.from_exception(ex)
        logger.warning(
            "Test generator failed for %s: %s", input_path, error.message, exc_info=ex
        )

        line_ending = self.config.line_ending
        source = f"{type(ex).__module__}.{type(ex).__qualname__}"
        stack_trace = "".join(traceback.format_tb(ex.__traceback__))
        exception_text = line_ending.join([error.message, "", source, stack_trace])
        content = renderer.render_error_lines(exception_text, line_ending)

        self.events.emit_generation_error(error)
        return content

    def _write_error_message(
        self,
        output_path: str,
        writer: OutputWriter,
        renderer: LanguageRenderer,
        message: str,
    ) -> str:
        writer(output_path, renderer.render_error_lines(message, self.config.line_ending))
        return output_path

    def _no_reference_message(self) -> str:
        return self.template_engine.render_template(
            "no_reference", self._message_context()
        )

    def _version_conflict_message(self, generator_version: Version) -> str:
        return self.template_engine.render_template(
            "version_conflict",
            self._message_context(
                generator_version=generator_version,
                referenced_version=self.project_info.referenced_version,
            ),
        )

    def _message_context(self, **extra) -> dict:
        return {
            "project_name": self.project_info.project_name,
            "framework_name": self.config.framework_name,
            "framework_package": self.config.framework_package,
            "documentation_url": self.config.documentation_url,
            **extra,
        }

    def _report_other_error(self, ex: BaseException, message: str, *args) -> None:
        logger.error(message, *args, exc_info=ex)
        self.events.emit_other_error(ex)
