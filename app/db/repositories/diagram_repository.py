from app.db.models.diagram import Diagram as DiagramModel
from app.db.repositories.record_repository import RecordRepository
from app.domains.diagrams.entities import Diagram


class DiagramRepository(RecordRepository[Diagram]):
    """Репозиторий для работы с диаграммами"""

    model = DiagramModel
    search_columns = ("title", "description")
    fields = ("title", "description", "diagram_data", "category", "tags", "is_template")

    def _build(self, db_diagram: DiagramModel, **common) -> Diagram:
        return Diagram(
            title=db_diagram.title,
            description=db_diagram.description,
            diagram_data=db_diagram.diagram_data,
            category=db_diagram.category,
            tags=db_diagram.tags,
            is_template=db_diagram.is_template,
            **common
        )
