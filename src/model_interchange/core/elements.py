import logging
from enum import StrEnum
from typing import Any

from model_interchange.core.errors import DataFormatError, ElementNotFoundError
from model_interchange.core.jmi import JmiType, convert_jmi
from model_interchange.core.ports.elements import ElementStore
from model_interchange.models import Element

logger = logging.getLogger(__name__)


class JmiFormat(StrEnum):
    JMI1 = "jmi1"
    JMI2 = "jmi2"
    JMI3 = "jmi3"

    @property
    def jmi_type(self) -> JmiType:
        return JmiType(int(self.value[-1]))


def parse_format(value: str) -> JmiFormat:
    try:
        return JmiFormat(value)
    except ValueError:
        raise DataFormatError(f"The format {value} is not a valid format.") from None


def render_elements(elements: list[dict[str, Any]], fmt: JmiFormat) -> list[dict[str, Any]] | dict[str, Any]:
    """Render public element data in the requested JMI format."""
    if fmt is JmiFormat.JMI1:
        return elements
    return convert_jmi(JmiType.FLAT, fmt.jmi_type, elements, "id")


async def find_elements(
    store: ElementStore,
    org: str,
    project: str,
    branch: str,
    ids: list[str] | None = None,
    fmt: JmiFormat | str = JmiFormat.JMI1,
) -> list[dict[str, Any]] | dict[str, Any]:
    jmi_format = parse_format(fmt) if not isinstance(fmt, JmiFormat) else fmt
    elements = await store.find_elements(org, project, branch, ids)
    if not elements:
        raise ElementNotFoundError("No elements found.")
    logger.debug("Found %d element(s) in %s/%s/%s", len(elements), org, project, branch)
    return render_elements(elements, jmi_format)


async def create_elements(
    store: ElementStore,
    org: str,
    project: str,
    branch: str,
    elements: list[Element],
) -> list[dict[str, Any]]:
    if not elements:
        raise DataFormatError("No elements provided.")
    return await store.create_elements(org, project, branch, elements)
