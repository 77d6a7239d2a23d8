"""Models for the rules API."""

import html
import re
from typing import Any

from pydantic import Field

from sonarqube_client.models import Facet, PaginatedResponse, SonarQubeModel


class DescriptionSection(SonarQubeModel):
    """Section of a rule description."""

    key: str = Field(description="Section key (e.g., 'root_cause', 'how_to_fix')")
    content: str = Field(description="HTML content of the section")


class RuleImpact(SonarQubeModel):
    software_quality: str = Field(alias="softwareQuality")
    severity: str


class Rule(SonarQubeModel):
    """Coding rule as returned by /api/rules/search and /api/rules/show."""

    key: str = Field(description="Rule key (e.g., 'typescript:S3801')")
    repo: str | None = Field(default=None, description="Repository (e.g., 'typescript')")
    name: str = Field(description="Rule name")
    lang: str | None = Field(default=None, description="Programming language code (e.g., 'ts')")
    lang_name: str | None = Field(
        default=None,
        alias="langName",
        description="Language display name (e.g., 'TypeScript')",
    )
    severity: str | None = Field(default=None, description="Default severity (MAJOR, MINOR, etc.)")
    type: str | None = Field(default=None, description="Rule type (BUG, VULNERABILITY, CODE_SMELL)")
    status: str | None = Field(default=None, description="READY, BETA, DEPRECATED or REMOVED")
    impacts: list[RuleImpact] = Field(default_factory=list)
    clean_code_attribute: str | None = Field(default=None, alias="cleanCodeAttribute")
    clean_code_attribute_category: str | None = Field(default=None, alias="cleanCodeAttributeCategory")
    description_sections: list[DescriptionSection] = Field(
        default_factory=list,
        alias="descriptionSections",
        description="Sections of the rule description",
    )
    html_desc: str | None = Field(default=None, alias="htmlDesc", description="HTML description (older API format)")
    md_desc: str | None = Field(default=None, alias="mdDesc", description="Markdown description (if available)")
    sys_tags: list[str] = Field(default_factory=list, alias="sysTags", description="System tags")
    tags: list[str] = Field(default_factory=list, description="User tags")
    is_template: bool = Field(default=False, alias="isTemplate")
    template_key: str | None = Field(default=None, alias="templateKey")
    is_external: bool = Field(default=False, alias="isExternal")
    params: list[dict[str, Any]] = Field(default_factory=list)
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")

    @property
    def markdown_description(self) -> str:
        """Get rule description in markdown format.

        Prefers ``mdDesc``, then the description sections, then ``htmlDesc``.

        Returns:
            Rule description in markdown
        """
        if self.md_desc:
            return self.md_desc

        if self.description_sections:
            return "\n\n".join(self._html_to_markdown(section.content) for section in self.description_sections)

        if self.html_desc:
            return self._html_to_markdown(self.html_desc)

        return "No description available"

    @staticmethod
    def _html_to_markdown(html_content: str) -> str:
        """Convert HTML to basic markdown.

        Args:
            html_content: HTML string

        Returns:
            Markdown-formatted string
        """
        text = html.unescape(html_content)

        substitutions = [
            (r"<h1>(.*?)</h1>", r"# \1\n"),
            (r"<h2>(.*?)</h2>", r"## \1\n"),
            (r"<h3>(.*?)</h3>", r"### \1\n"),
            (r"<(?:strong|b)>(.*?)</(?:strong|b)>", r"**\1**"),
            (r"<(?:em|i)>(.*?)</(?:em|i)>", r"*\1*"),
            (r"<code>(.*?)</code>", r"`\1`"),
            (r"<pre>(.*?)</pre>", r"```\n\1\n```\n"),
            (r"<li>(.*?)</li>", r"- \1\n"),
            (r"<(?:ul|ol)>(.*?)</(?:ul|ol)>", r"\1"),
            (r"<p>(.*?)</p>", r"\1\n\n"),
        ]
        for pattern, replacement in substitutions:
            text = re.sub(pattern, replacement, text, flags=re.IGNORECASE | re.DOTALL)

        # Remove remaining HTML tags
        text = re.sub(r"<[^>]+>", "", text)
        text = re.sub(r"\n{3,}", "\n\n", text)

        return text.strip()


class SearchRulesResponse(PaginatedResponse):
    """Response from /api/rules/search."""

    rules: list[Rule] = Field(default_factory=list)
    facets: list[Facet] = Field(default_factory=list)
    actives: dict[str, list[dict[str, Any]]] = Field(default_factory=dict)


class ShowRuleResponse(SonarQubeModel):
    """Response from /api/rules/show."""

    rule: Rule = Field(description="Rule details")
    actives: list[dict[str, Any]] = Field(default_factory=list)


class RuleRepository(SonarQubeModel):
    key: str
    name: str
    language: str | None = None
