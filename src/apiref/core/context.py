"""Application context with dependency injection."""

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

from apiref.core.config import ApiRefConfig, default_config_dir, load_config
from apiref.core.fetcher import ContentFetcher
from apiref.core.generators import GeneratorPackageTable, load_generator_table
from apiref.core.package_versions import PackageVersionResolver
from apiref.core.references import ManifestReferenceStore
from apiref.core.user_feedback import InteractiveFeedback, SuppressedFeedback, UserFeedback
from apiref.core.workflow import ReferenceRegistrationWorkflow
from apiref.integrations.http import HttpClient, HttpxClient
from apiref.integrations.installer import DependencyInstaller, UvDependencyInstaller
from apiref.integrations.manifest import Manifest, TomlManifest

ManifestFactory = Callable[[Path], Manifest]


@dataclass(frozen=True)
class ApiRefContext:
    """Immutable context holding all dependencies for apiref operations.

    Created at CLI entry point and threaded through the application via
    click's context object. Frozen to prevent accidental modification at
    runtime. Tests build one with ApiRefContext.for_test().
    """

    http: HttpClient
    installer: DependencyInstaller
    feedback: UserFeedback
    config: ApiRefConfig
    generator_table: GeneratorPackageTable
    cwd: Path  # Current working directory at CLI invocation
    manifest_factory: ManifestFactory

    def open_manifest(self, path: Path) -> Manifest:
        return self.manifest_factory(path)

    def reference_store(self, manifest_path: Path) -> ManifestReferenceStore:
        return ManifestReferenceStore(self.open_manifest(manifest_path), self.cwd)

    def fetcher(self) -> ContentFetcher:
        return ContentFetcher(self.http, self.cwd, self.feedback)

    def resolver(self) -> PackageVersionResolver:
        return PackageVersionResolver(self.http, self.generator_table, self.config.package_version_url)

    def registration_workflow(self, manifest_path: Path) -> ReferenceRegistrationWorkflow:
        return ReferenceRegistrationWorkflow(
            resolver=self.resolver(),
            installer=self.installer,
            fetcher=self.fetcher(),
            store=self.reference_store(manifest_path),
            feedback=self.feedback,
            working_dir=self.cwd,
        )

    @staticmethod
    def for_test(
        *,
        cwd: Path,
        http: HttpClient | None = None,
        installer: DependencyInstaller | None = None,
        feedback: UserFeedback | None = None,
        config: ApiRefConfig | None = None,
        generator_table: GeneratorPackageTable | None = None,
        manifest_factory: ManifestFactory | None = None,
    ) -> "ApiRefContext":
        """Create test context with fakes for anything not provided.

        The manifest defaults to a real TomlManifest so CLI tests can assert
        on the pyproject.toml written under cwd.

        Example:
            >>> http = FakeHttpClient(responses={url: b"{}"})
            >>> installer = FakeDependencyInstaller()
            >>> ctx = ApiRefContext.for_test(cwd=tmp_path, http=http, installer=installer)
            >>> result = runner.invoke(cli, ["add", "url", url], obj=ctx)
        """
        from tests.fakes.http import FakeHttpClient
        from tests.fakes.installer import FakeDependencyInstaller
        from tests.fakes.user_feedback import FakeUserFeedback

        return ApiRefContext(
            http=http if http is not None else FakeHttpClient(),
            installer=installer if installer is not None else FakeDependencyInstaller(),
            feedback=feedback if feedback is not None else FakeUserFeedback(),
            config=config if config is not None else ApiRefConfig.defaults(),
            generator_table=generator_table if generator_table is not None else load_generator_table(),
            cwd=cwd,
            manifest_factory=manifest_factory if manifest_factory is not None else TomlManifest,
        )


def create_context(*, quiet: bool, config_dir: Path | None = None) -> ApiRefContext:
    """Create production context with real implementations.

    Called once at CLI entry point.

    Args:
        quiet: Suppress informational output
        config_dir: Directory holding config.toml (default: ~/.apiref)
    """
    config = load_config(config_dir if config_dir is not None else default_config_dir())
    feedback: UserFeedback = SuppressedFeedback() if quiet else InteractiveFeedback()

    return ApiRefContext(
        http=HttpxClient(timeout_seconds=config.http_timeout_seconds),
        installer=UvDependencyInstaller(
            command=config.installer_command,
            timeout_seconds=config.install_timeout_seconds,
        ),
        feedback=feedback,
        config=config,
        generator_table=load_generator_table(),
        cwd=Path.cwd(),
        manifest_factory=TomlManifest,
    )
