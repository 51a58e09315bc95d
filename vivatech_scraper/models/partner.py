"""Partner (exhibitor) model built from the partners page JSON."""

from pydantic import BaseModel, ConfigDict, Field


class Partner(BaseModel):
    """A partner or startup exhibiting at the conference."""

    name: str = Field(description="Company name, unique within a run")
    category: str = Field(default="", description="Raw 'type' value, e.g. 'gold partner'")
    country: str = Field(default="", description="Derived from city or company name")
    description: str = ""
    website: str = ""
    logo_url: str = ""


class PartnerRecord(BaseModel):
    """Flat CSV row for a partner. Absent data is the empty string."""

    model_config = ConfigDict(populate_by_name=True)

    company_name: str = Field(alias="CompanyName")
    category: str = Field(alias="Category")
    country: str = Field(alias="Country")
    description: str = Field(alias="Description")
    website: str = Field(alias="Website")
    logo_url: str = Field(alias="LogoURL")


PARTNER_COLUMNS = [field.alias for field in PartnerRecord.model_fields.values()]


def partner_to_record(partner: Partner) -> PartnerRecord:
    """Flatten a Partner into its CSV row."""
    return PartnerRecord(
        company_name=partner.name,
        category=partner.category,
        country=partner.country,
        description=partner.description,
        website=partner.website,
        logo_url=partner.logo_url,
    )
