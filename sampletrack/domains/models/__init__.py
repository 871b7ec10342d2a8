# sampletrack/domains/models/__init__.py

"""
모든 도메인의 SQLModel 모델들을 한 곳에서 임포트하여
SQLModel.metadata가 모든 테이블을 인식하도록 보장합니다.
"""

# teams (Team)
from sampletrack.domains.teams.models import Team

# fields (Field)
from sampletrack.domains.fields.models import Field

# samples (Sample, SampleAudit)
from sampletrack.domains.samples.models import Sample, SampleAudit

# labels (Label)
from sampletrack.domains.labels.models import Label

__all__ = ["Team", "Field", "Sample", "SampleAudit", "Label"]
