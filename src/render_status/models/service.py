"""Render service identity extracted from a preview comment."""

from pydantic import BaseModel, ConfigDict, Field


class ServiceIdentity(BaseModel):
    """Identity of the Render preview service a comment refers to.

    Attributes:
        server_url: Public URL of the PR preview server
        service_name: Service name token from the dashboard URL
        service_id: Render service identifier (e.g. srv-abc123)
        dashboard_url: Dashboard URL rebuilt from name and id
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    server_url: str = Field(..., description="Public URL of the PR preview server")
    service_name: str = Field(..., description="Service name from the dashboard URL")
    service_id: str = Field(..., description="Render service identifier")
    dashboard_url: str = Field(..., description="Render dashboard URL for the service")
