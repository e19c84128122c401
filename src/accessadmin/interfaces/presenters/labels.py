"""Label keys and the default English catalogue."""

from collections.abc import Callable, Mapping

Translate = Callable[[str], str]

DEFAULT_LABELS: dict[str, str] = {
    "common.loading": "Loading...",
    "common.error": "Something went wrong.",
    "common.cancel": "Cancel",
    "accesscontrol.list_404": "No access entries found.",
    "accesscontrol.list_title": "Access entries",
    "accesscontrol.edit": "Edit",
    "accesscontrol.delete": "Delete",
    "accesscontrol.form_title_create": "New access entry",
    "accesscontrol.form_title_edit": "Edit access entry",
    "accesscontrol.create_button": "Create",
    "accesscontrol.update_button": "Update",
    "accesscontrol.identity": "Identity",
    "accesscontrol.permission": "Permission",
    "accesscontrol.resource": "Resource",
    "accesscontrol.resource_type": "Resource type",
    "accesscontrol.create_error": "Could not create the access entry.",
    "accesscontrol.update_error": "Could not update the access entry.",
}


def catalogue_translator(labels: Mapping[str, str] | None = None) -> Translate:
    """Translator backed by a mapping. Unknown keys render as the key itself."""
    table = dict(DEFAULT_LABELS)
    if labels:
        table.update(labels)

    def translate(key: str) -> str:
        return table.get(key, key)

    return translate
