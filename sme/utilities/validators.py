"""
Input validation schemas using Pydantic for caller-supplied data.
"""
from pydantic import BaseModel, Field, field_validator, model_validator
from typing import List
from datetime import date

from sme.utilities.constants import MIN_IMPACT_SCORE, MAX_IMPACT_SCORE


class ProductInput(BaseModel):
    """Schema for product input validation."""
    name: str = Field(..., min_length=1, max_length=200)
    category: str = Field("", max_length=100)
    price: float = Field(..., ge=0)
    stock: int = Field(..., ge=0)
    reorder_level: int = Field(0, ge=0)

    @field_validator('name', 'category')
    @classmethod
    def strip_whitespace(cls, v):
        """Remove leading/trailing whitespace."""
        if isinstance(v, str):
            return v.strip()
        return v


class ReceivableInput(BaseModel):
    """Schema for an invoice to collect."""
    amount: float = Field(..., gt=0)
    due_date: date


class PayableInput(BaseModel):
    """Schema for a bill to pay."""
    amount: float = Field(..., gt=0)
    due_date: date
    impact_score: int = Field(..., ge=MIN_IMPACT_SCORE, le=MAX_IMPACT_SCORE)


class LeadInput(BaseModel):
    """Schema for lead input validation."""
    name: str = Field(..., min_length=1, max_length=200)
    email: str = Field("", max_length=254)
    phone: str = Field("", max_length=40)

    @field_validator('name', 'email', 'phone')
    @classmethod
    def strip_whitespace(cls, v):
        return v.strip() if isinstance(v, str) else v


class TaskInput(BaseModel):
    """Schema for workflow task validation."""
    name: str = Field(..., min_length=1, max_length=200)
    duration_days: int = Field(..., ge=0)

    @field_validator('name')
    @classmethod
    def validate_name(cls, v):
        if not v.strip():
            raise ValueError('Task name cannot be empty')
        return v.strip()


class DependencyInput(BaseModel):
    """'task' depends on 'depends_on' (both given by task name)."""
    task: str = Field(..., min_length=1)
    depends_on: str = Field(..., min_length=1)


class SuiteInput(BaseModel):
    """Schema for a bulk load of every store."""
    products: List[ProductInput] = Field(default_factory=list)
    receivables: List[ReceivableInput] = Field(default_factory=list)
    payables: List[PayableInput] = Field(default_factory=list)
    leads: List[LeadInput] = Field(default_factory=list)
    tasks: List[TaskInput] = Field(default_factory=list)
    dependencies: List[DependencyInput] = Field(default_factory=list)

    @model_validator(mode='after')
    def check_task_references(self):
        """Task names must be unique and every dependency must name known tasks."""
        names = [t.name for t in self.tasks]
        if len(names) != len(set(names)):
            raise ValueError('Task names must be unique')
        known = set(names)
        for dep in self.dependencies:
            for ref in (dep.task, dep.depends_on):
                if ref not in known:
                    raise ValueError(f"Unknown task in dependency: {ref}")
        return self
