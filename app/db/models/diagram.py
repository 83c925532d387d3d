from sqlalchemy import Boolean, Column, String, Text, Integer, ForeignKey, UUID, JSON

from app.db.base import BaseModel


class Diagram(BaseModel):
    __tablename__ = "diagrams"

    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False, default="")
    # Данные редактора графов: { nodes: [], edges: [] }
    diagram_data = Column(JSON, nullable=False)
    category = Column(String(100), nullable=False, default="General", index=True)
    tags = Column(JSON, nullable=False, default=list)
    is_template = Column(Boolean, nullable=False, default=False, index=True)
    version = Column(Integer, nullable=False, default=1)
    author_id = Column(UUID(as_uuid=True), ForeignKey("users.uuid"), nullable=False)
