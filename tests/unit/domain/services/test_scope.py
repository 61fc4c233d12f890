"""Unit tests for NameResolver and FileScope (PHP name resolution)."""

import pytest

from form_entity_guard.domain.entities import ClassInfo
from form_entity_guard.domain.services.reflection import SourceReflectionProvider
from form_entity_guard.domain.services.scope import FileScope, NameResolver
from form_entity_guard.domain.syntax import ClassDeclaration, Name, NamespaceBlock, UseImport

BASE = "Symfony\\Component\\Form\\AbstractType"


@pytest.fixture
def namespace() -> NamespaceBlock:
    return NamespaceBlock(
        name="App\\Form",
        imports=(
            UseImport("App\\Entity\\Invoice"),
            UseImport("App\\Dto\\InvoiceData", alias="Data"),
            UseImport("Doctrine\\ORM\\Mapping", alias="ORM"),
            UseImport("Symfony\\Component\\Form\\AbstractType"),
        ),
    )


class TestNameResolver:
    @pytest.mark.parametrize(
        ("written", "expected"),
        [
            ("Invoice", "App\\Entity\\Invoice"),
            ("invoice", "App\\Entity\\Invoice"),
            ("Data", "App\\Dto\\InvoiceData"),
            ("ORM\\Entity", "Doctrine\\ORM\\Mapping\\Entity"),
            ("\\App\\Entity\\Order", "App\\Entity\\Order"),
            ("namespace\\Sub\\Type", "App\\Form\\Sub\\Type"),
            ("OrderType", "App\\Form\\OrderType"),
            ("Sub\\Type", "App\\Form\\Sub\\Type"),
        ],
    )
    def test_resolve(self, namespace: NamespaceBlock, written: str, expected: str) -> None:
        assert NameResolver(namespace).resolve(written) == expected

    def test_global_namespace_leaves_names_unqualified(self) -> None:
        assert NameResolver(NamespaceBlock()).resolve("Invoice") == "Invoice"

    def test_class_info_resolves_all_names(self, namespace: NamespaceBlock) -> None:
        decl = ClassDeclaration(
            name="InvoiceType",
            parent=Name("AbstractType"),
            interfaces=(Name("\\JsonSerializable"),),
            attributes=(Name("ORM\\Entity"),),
            line=7,
        )

        info = NameResolver(namespace).class_info(decl, file="src/Form/InvoiceType.php")

        assert info == ClassInfo(
            name="App\\Form\\InvoiceType",
            parent=BASE,
            interfaces=("JsonSerializable",),
            attributes=frozenset({"Doctrine\\ORM\\Mapping\\Entity"}),
            file="src/Form/InvoiceType.php",
            line=7,
        )


class TestFileScope:
    def _scope(self, namespace: NamespaceBlock, decl: ClassDeclaration | None) -> FileScope:
        reflection = SourceReflectionProvider(
            [
                ClassInfo(name=BASE, external=True),
                ClassInfo(name="App\\Form\\InvoiceType", parent=BASE),
            ]
        )
        return FileScope(NameResolver(namespace), reflection, decl)

    def test_class_name(self, namespace: NamespaceBlock) -> None:
        scope = self._scope(namespace, ClassDeclaration(name="InvoiceType"))

        assert scope.class_name == "App\\Form\\InvoiceType"

    def test_no_declaration_has_no_class(self, namespace: NamespaceBlock) -> None:
        scope = self._scope(namespace, None)

        assert scope.class_name is None
        assert scope.is_subclass_of(BASE) is False

    @pytest.mark.parametrize("special", ["self", "static", "SELF"])
    def test_self_and_static_resolve_to_enclosing_class(self, namespace: NamespaceBlock, special: str) -> None:
        scope = self._scope(namespace, ClassDeclaration(name="InvoiceType"))

        assert scope.resolve_name(Name(special)) == "App\\Form\\InvoiceType"

    def test_parent_resolves_to_declared_parent(self, namespace: NamespaceBlock) -> None:
        scope = self._scope(namespace, ClassDeclaration(name="InvoiceType", parent=Name("AbstractType")))

        assert scope.resolve_name(Name("parent")) == BASE

    def test_is_subclass_of_uses_reflection(self, namespace: NamespaceBlock) -> None:
        form = self._scope(namespace, ClassDeclaration(name="InvoiceType"))
        other = self._scope(namespace, ClassDeclaration(name="Exporter"))

        assert form.is_subclass_of(BASE) is True
        assert other.is_subclass_of(BASE) is False

    def test_resolve_name_uses_imports(self, namespace: NamespaceBlock) -> None:
        scope = self._scope(namespace, ClassDeclaration(name="InvoiceType"))

        assert scope.resolve_name(Name("Invoice")) == "App\\Entity\\Invoice"
