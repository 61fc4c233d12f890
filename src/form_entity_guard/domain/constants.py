"""Fixed names the form data-class rule monitors."""

CONFIGURE_OPTIONS_METHOD: str = "configureOptions"
FORM_BASE_TYPE: str = "Symfony\\Component\\Form\\AbstractType"
DATA_CLASS_OPTION: str = "data_class"
ENTITY_MARKER: str = "Doctrine\\ORM\\Mapping\\Entity"

SET_DEFAULT_SELECTOR: str = "setDefault"
SET_DEFAULTS_SELECTOR: str = "setDefaults"

# Stable tag callers use for suppression; keep in sync with existing baselines.
ENTITY_AS_DATA_CLASS_IDENTIFIER: str = "dsnet.noEntityAsFormDataClass"
ENTITY_AS_DATA_CLASS_MESSAGE: str = "Cannot use Entity ({class_name}) as a Form data class, use DTO"

DEFAULT_EXCLUDE_PATHS: tuple[str, ...] = ("vendor/", "var/", "node_modules/")
PHP_FILE_SUFFIX: str = ".php"
TOOL_CONFIG_SECTION: str = "form-entity-guard"
