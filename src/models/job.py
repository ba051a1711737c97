# =============================================================================
# Job Posting Models
# =============================================================================
"""
Pydantic models for the job posting scrape endpoint.

Field names follow Python conventions; the JSON keys used by the frontend
(camelCase) are provided as aliases.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


Seniority = Literal["intern", "junior", "mid", "senior"]


class JobData(BaseModel):
    """
    Structured data extracted from a job posting page.

    Attributes:
        company: Employer name, empty if undetermined.
        role: Job title, empty if undetermined.
        job_description: Full description text, empty if undetermined.
        company_info: Secondary description of the employer.
        seniority: Experience level derived from the role title.
    """

    model_config = ConfigDict(populate_by_name=True)

    company: str = Field(
        default="",
        description="Employer name"
    )
    role: str = Field(
        default="",
        description="Job title"
    )
    job_description: str = Field(
        default="",
        alias="jobDescription",
        description="Full job description text"
    )
    company_info: str = Field(
        default="",
        alias="companyInfo",
        description="Description of the employer"
    )
    seniority: Seniority = Field(
        default="junior",
        description="Experience level derived from the role title"
    )


class JobScrapeRequest(BaseModel):
    """
    Request payload for the scrape endpoint.

    The URL is optional at the schema level so that a missing value can be
    reported with the endpoint's own error message.

    Attributes:
        url: URL of the job posting to scrape.
    """

    url: Optional[str] = Field(
        default=None,
        description="URL of the job posting to scrape"
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"url": "https://boards.greenhouse.io/acme/jobs/123456"}
            ]
        }
    }


class JobScrapeResponse(BaseModel):
    """
    Successful response from the scrape endpoint.

    Attributes:
        success: Always true for a successful scrape.
        data: The extracted job data.
    """

    success: bool = Field(
        default=True,
        description="Whether the scrape succeeded"
    )
    data: JobData = Field(
        description="Extracted job data"
    )


class ScrapeErrorResponse(BaseModel):
    """
    Error response from the scrape endpoint.

    Attributes:
        error: Human-readable error message.
    """

    error: str = Field(
        description="Error message"
    )
