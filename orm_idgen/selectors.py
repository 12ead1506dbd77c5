"""
Selector for identifier fields the persistence provider assigns itself.
"""

from orm_idgen.core.exceptions import NotAnEntityError
from orm_idgen.metamodel.attributes import IAttributeCatalog
from orm_idgen.spi.node import Node
from shared.utils.logger import log_trace, setup_logger

logger = setup_logger(__name__)


class GeneratedIdSelector:
    """
    Matches nodes whose field is a database-generated identifier.

    Hosts set such fields to None so the database assigns them on insert;
    the generator provider is then never asked about them.

    Example:
        >>> selector = GeneratedIdSelector(SqlAlchemyMetamodel(Base))
        >>> selector(Node(int, FieldRef(Customer, "id")))
        True
    """

    def __init__(self, metamodel: IAttributeCatalog):
        self.metamodel = metamodel

    def __call__(self, node: Node) -> bool:
        field = node.field
        if field is None:
            return False

        try:
            entity_type = self.metamodel.entity(field.declaring_class)
        except NotAnEntityError as e:
            log_trace(logger, f"{field.declaring_class_name} is not a managed entity", e)
            return False

        attribute = entity_type.attribute(field.name)
        return attribute is not None and attribute.is_id and attribute.is_generated
