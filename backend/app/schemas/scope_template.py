from pydantic import BaseModel


class ScopeTemplate(BaseModel):
    name: str
    category: str
    scope_of_work: str
    unit: str
