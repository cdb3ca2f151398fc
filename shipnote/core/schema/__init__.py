from shipnote.core.schema.commit import Commit
from shipnote.core.schema.deployment import Deployment, DeploymentStatus
from shipnote.core.schema.lookup import Lookup
from shipnote.core.schema.message import Attachment, AttachmentField
from shipnote.core.schema.pr import CorrelatedPullRequest, PullRequest, Ticket

__all__ = [
    "Attachment",
    "AttachmentField",
    "Commit",
    "CorrelatedPullRequest",
    "Deployment",
    "DeploymentStatus",
    "Lookup",
    "PullRequest",
    "Ticket",
]
