"""Register an OpenAPI reference in a project.

The workflow moves through a fixed sequence of states:

    RESOLVE_INPUTS → ENSURE_DEPENDENCIES → ACQUIRE_CONTENT → REGISTER_REFERENCE → DONE

RESOLVE_INPUTS can short-circuit to REJECTED when the source is unusable.
ACQUIRE_CONTENT only runs for URL references. Package installation and
download failures propagate as exceptions. Both happen before the manifest is
touched, so a failed run leaves the manifest as it was. Registering a
reference that already exists is reported as a warning and the run still
succeeds, which makes re-running against a configured project safe.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Literal

from apiref.core.fetcher import ContentFetcher, DownloadOutcome
from apiref.core.generators import CodeGenerator
from apiref.core.package_versions import PackageVersionResolver
from apiref.core.references import (
    CODE_GENERATOR_KEY,
    OPENAPI_PROJECT_REFERENCE,
    OPENAPI_REFERENCE,
    ManifestReferenceStore,
    RegistrationResult,
)
from apiref.core.urls import is_remote_url
from apiref.core.user_feedback import UserFeedback
from apiref.integrations.installer import DependencyInstaller

logger = logging.getLogger(__name__)

ReferenceKind = Literal["url", "file", "project"]

SOURCE_URL_ARG_NAME = "source-URL"


class WorkflowState(Enum):
    RESOLVE_INPUTS = "resolve-inputs"
    ENSURE_DEPENDENCIES = "ensure-dependencies"
    ACQUIRE_CONTENT = "acquire-content"
    REGISTER_REFERENCE = "register-reference"
    DONE = "done"
    REJECTED = "rejected"


@dataclass(frozen=True)
class RegistrationRequest:
    """Inputs for one registration run.

    Attributes:
        kind: "url" downloads source first; "file" and "project" register an
            existing local path
        source: URL or local path, as given on the command line
        project_dir: Directory of the project manifest (installer working dir)
        code_generator: Generator whose packages are installed
        output_file: Download destination for URL references; ignored otherwise
    """

    kind: ReferenceKind
    source: str | None
    project_dir: Path
    code_generator: CodeGenerator
    output_file: str | None = None


@dataclass(frozen=True)
class WorkflowResult:
    """Outcome of a registration run."""

    state: WorkflowState
    exit_code: int
    states: list[WorkflowState] = field(default_factory=list)
    packages: dict[str, str] = field(default_factory=dict)
    download: DownloadOutcome | None = None
    registration: RegistrationResult | None = None


class ReferenceRegistrationWorkflow:
    """Resolve packages, install them, fetch content, and record the reference."""

    def __init__(
        self,
        *,
        resolver: PackageVersionResolver,
        installer: DependencyInstaller,
        fetcher: ContentFetcher,
        store: ManifestReferenceStore,
        feedback: UserFeedback,
        working_dir: Path,
    ) -> None:
        self._resolver = resolver
        self._installer = installer
        self._fetcher = fetcher
        self._store = store
        self._feedback = feedback
        self._working_dir = working_dir

    def run(self, request: RegistrationRequest) -> WorkflowResult:
        """Execute the workflow for request.

        Returns:
            WorkflowResult in state DONE (exit code 0) or REJECTED (exit code 1)

        Raises:
            DependencyInstallError: If a package could not be installed
            DownloadError: If the remote document could not be downloaded
        """
        states = [WorkflowState.RESOLVE_INPUTS]
        rejection = self._validate(request)
        if rejection is not None:
            self._feedback.error(rejection)
            states.append(WorkflowState.REJECTED)
            return WorkflowResult(state=WorkflowState.REJECTED, exit_code=1, states=states)
        assert request.source is not None

        states.append(WorkflowState.ENSURE_DEPENDENCIES)
        packages = self._resolver.resolve(request.code_generator)
        logger.debug("Installing %s into %s", packages, request.project_dir)
        self._installer.install(request.project_dir, packages)

        download: DownloadOutcome | None = None
        if request.kind == "url":
            states.append(WorkflowState.ACQUIRE_CONTENT)
            include = request.output_file or default_output_file()
            download = self._fetcher.fetch(request.source, include, overwrite=False)
            source_url: str | None = request.source
        else:
            include = request.source
            source_url = None

        states.append(WorkflowState.REGISTER_REFERENCE)
        tag = OPENAPI_PROJECT_REFERENCE if request.kind == "project" else OPENAPI_REFERENCE
        registration = self._store.register(
            tag,
            include,
            source_url,
            metadata={CODE_GENERATOR_KEY: request.code_generator},
        )
        self._report(registration, include, source_url)

        states.append(WorkflowState.DONE)
        return WorkflowResult(
            state=WorkflowState.DONE,
            exit_code=0,
            states=states,
            packages=packages,
            download=download,
            registration=registration,
        )

    def _validate(self, request: RegistrationRequest) -> str | None:
        if not request.source:
            return f"The {_argument_name(request.kind)} argument is required."

        if request.kind == "url":
            if not is_remote_url(request.source):
                return f"{SOURCE_URL_ARG_NAME} was not valid. Valid values are URLs"
            return None

        path = Path(request.source)
        if not path.is_absolute():
            path = self._working_dir / path
        if not path.exists():
            return f"The file '{path}' does not exist."
        return None

    def _report(self, registration: RegistrationResult, include: str, source_url: str | None) -> None:
        manifest_path = self._store.manifest_path
        if registration == "duplicate-path":
            self._feedback.warning(
                f"One or more references to {include} already exist. "
                "Duplicate references could lead to unexpected behavior."
            )
        elif registration == "duplicate-identity":
            self._feedback.warning(f"A reference to '{source_url}' already exists in '{manifest_path}'.")
        else:
            self._feedback.success(f"✓ Added reference to {include} in {manifest_path}")


def default_output_file() -> str:
    """Download destination used when --output-file is not given."""
    return str(Path("openapi") / "openapi.json")


def _argument_name(kind: ReferenceKind) -> str:
    if kind == "url":
        return SOURCE_URL_ARG_NAME
    if kind == "file":
        return "source-file"
    return "project"
