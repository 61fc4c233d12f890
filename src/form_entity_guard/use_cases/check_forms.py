"""Check use case: scan a PHP tree and run the form data-class rule on every method."""

import logging

from form_entity_guard.domain.config import ConfigurationLoader
from form_entity_guard.domain.entities import CheckResult, FileError
from form_entity_guard.domain.protocols import FileSystemProtocol, PhpSourceGatewayProtocol
from form_entity_guard.domain.rules import Violation
from form_entity_guard.domain.rules.entity_data_class import EntityAsFormDataClassRule
from form_entity_guard.domain.services.reflection import SourceReflectionProvider
from form_entity_guard.domain.services.scope import FileScope, NameResolver
from form_entity_guard.domain.syntax import SourceFile

logger = logging.getLogger(__name__)


class CheckFormsUseCase:
    """
    Two passes over the tree.

    1. Parse every file and index its class declarations (on top of the
       configured external classes) so lineage and attributes are known for
       classes declared anywhere in the tree.
    2. Hand each method, with a scope for its class, to the rule.
    """

    def __init__(
        self,
        gateway: PhpSourceGatewayProtocol,
        filesystem: FileSystemProtocol,
        config_loader: ConfigurationLoader,
    ) -> None:
        self._gateway = gateway
        self._filesystem = filesystem
        self._config = config_loader

    def execute(self, target_paths: list[str], extra_exclude: list[str] | None = None) -> CheckResult:
        exclude = self._config.exclude_paths + list(extra_exclude or [])
        files: list[str] = []
        for target in target_paths:
            files.extend(self._filesystem.iter_php_files(target, exclude))
        files = sorted(set(files))
        logger.info("Scanning %d PHP file(s)", len(files))

        sources, errors = self._parse_all(files)
        reflection = self.build_reflection(sources)
        rule = EntityAsFormDataClassRule(reflection)

        violations: list[Violation] = []
        suppressed = 0
        ignored = self._config.ignore_identifiers
        for source in sources:
            for violation in self.check_source(source, rule, reflection):
                if violation.identifier in ignored:
                    suppressed += 1
                    continue
                violations.append(violation)
        logger.info(
            "Found %d violation(s) in %d file(s); %d suppressed",
            len(violations),
            len(sources),
            suppressed,
        )
        return CheckResult(
            violations=violations,
            files_scanned=len(sources),
            errors=errors,
            suppressed=suppressed,
        )

    def _parse_all(self, files: list[str]) -> tuple[list[SourceFile], list[FileError]]:
        sources: list[SourceFile] = []
        errors: list[FileError] = []
        for file_path in files:
            try:
                source = self._gateway.parse_file(file_path)
            except OSError as e:
                logger.warning("Cannot read %s: %s", file_path, e)
                errors.append(FileError(file=file_path, reason=str(e)))
                continue
            if source.has_syntax_errors:
                logger.warning("%s has syntax errors; analysing the recoverable parts", file_path)
            sources.append(source)
        return sources, errors

    def build_reflection(self, sources: list[SourceFile]) -> SourceReflectionProvider:
        reflection = SourceReflectionProvider(self._config.external_classes)
        for source in sources:
            for namespace in source.namespaces:
                resolver = NameResolver(namespace)
                for declaration in namespace.classes:
                    reflection.register(resolver.class_info(declaration, file=source.path))
        logger.debug("Indexed %d class(es)", len(reflection))
        return reflection

    @staticmethod
    def check_source(
        source: SourceFile,
        rule: EntityAsFormDataClassRule,
        reflection: SourceReflectionProvider,
    ) -> list[Violation]:
        violations: list[Violation] = []
        for namespace in source.namespaces:
            resolver = NameResolver(namespace)
            for declaration in namespace.classes:
                scope = FileScope(resolver, reflection, declaration)
                for method in declaration.methods:
                    violations.extend(
                        v.with_file(source.path) for v in rule.check(method, scope)
                    )
        return violations
