from typing import Dict, List, Optional, Union
from pydantic import BaseModel, Field

class RepoOwner(BaseModel):
    login: str
    avatar_url: str
    url: str

class RepoInfo(BaseModel):
    name: str
    full_name: str
    description: Optional[str] = None
    url: str
    stars: int = Field(..., ge=0)
    forks: int = Field(..., ge=0)
    last_updated: Optional[str] = None
    last_commit_message: str = ""
    last_commit_url: str = ""
    owner: RepoOwner

class RepoInfoError(BaseModel):
    """Degraded entry returned in place of RepoInfo when a lookup fails."""
    name: str
    error: str
    last_updated: None = None

RepoInfoResult = Union[RepoInfo, RepoInfoError]
BatchResult = Dict[str, RepoInfoResult]

class ReposInfoRequest(BaseModel):
    repos: List[str] = Field(..., description="Repo references: owner/name or GitHub URLs")
