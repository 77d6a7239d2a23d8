"""Client for the quality profiles API."""

from typing import Any

from sonarqube_client.core.base_client import BaseClient
from sonarqube_client.core.builders.validation import validate_one_of_required
from sonarqube_client.core.deprecation import deprecated
from sonarqube_client.resources.quality_profiles.builders import (
    ActivateRulesBuilder,
    DeactivateRulesBuilder,
    ProfileChangelogBuilder,
    ProfileProjectsBuilder,
    SearchProfilesBuilder,
    validate_profile_identification,
)
from sonarqube_client.resources.quality_profiles.models import (
    BulkRuleChangeResponse,
    CompareResponse,
    CreateProfileResponse,
    InheritanceResponse,
    ProfileChangelogResponse,
    ProfileFormat,
    ProfileProjectsResponse,
    QualityProfile,
    SearchProfilesResponse,
)


def profile_params(key: str | None, quality_profile: str | None, language: str | None) -> dict[str, Any]:
    """Build and check the parameters identifying a profile.

    Raises:
        SonarQubeValidationError: Neither a key nor a name and language
    """
    params = {"key": key, "qualityProfile": quality_profile, "language": language}
    validate_profile_identification(params)
    return params


class QualityProfilesClient(BaseClient):
    """Manage quality profiles.

    Profiles are identified either by ``key`` or by ``quality_profile``
    (name) together with ``language``.
    """

    def search(self) -> SearchProfilesBuilder:
        return SearchProfilesBuilder(self._search)

    async def _search(self, params: dict[str, Any]) -> SearchProfilesResponse:
        data = await self._get("/api/qualityprofiles/search", params=self._with_organization(params))
        return SearchProfilesResponse(**data)

    async def create(self, name: str, language: str) -> CreateProfileResponse:
        data = await self._post(
            "/api/qualityprofiles/create",
            data=self._with_organization({"name": name, "language": language}),
        )
        return CreateProfileResponse(**data)

    async def copy(self, from_key: str, to_name: str) -> QualityProfile:
        data = await self._post("/api/qualityprofiles/copy", data={"fromKey": from_key, "toName": to_name})
        return QualityProfile(**data)

    async def rename(self, key: str, name: str) -> None:
        await self._post("/api/qualityprofiles/rename", data={"key": key, "name": name})

    async def delete(
        self,
        key: str | None = None,
        quality_profile: str | None = None,
        language: str | None = None,
    ) -> None:
        params = profile_params(key, quality_profile, language)
        await self._post("/api/qualityprofiles/delete", data=self._with_organization(params))

    async def set_default(
        self,
        key: str | None = None,
        quality_profile: str | None = None,
        language: str | None = None,
    ) -> None:
        params = profile_params(key, quality_profile, language)
        await self._post("/api/qualityprofiles/set_default", data=self._with_organization(params))

    async def activate_rule(
        self,
        key: str,
        rule: str,
        severity: str | None = None,
        params: dict[str, str] | None = None,
        reset: bool | None = None,
    ) -> None:
        """Activate a rule on a profile.

        Args:
            key: Profile key
            rule: Rule key
            severity: Severity override
            params: Rule parameters, sent as ``key1=v1;key2=v2``
            reset: Reset severity and parameters to the parent's values
        """
        encoded_params = ";".join(f"{k}={v}" for k, v in params.items()) if params else None
        await self._post(
            "/api/qualityprofiles/activate_rule",
            data={"key": key, "rule": rule, "severity": severity, "params": encoded_params, "reset": reset},
        )

    async def deactivate_rule(self, key: str, rule: str) -> None:
        await self._post("/api/qualityprofiles/deactivate_rule", data={"key": key, "rule": rule})

    def activate_rules(self) -> ActivateRulesBuilder:
        return ActivateRulesBuilder(self._activate_rules)

    async def _activate_rules(self, params: dict[str, Any]) -> BulkRuleChangeResponse:
        data = await self._post("/api/qualityprofiles/activate_rules", data=params)
        return BulkRuleChangeResponse(**data)

    def deactivate_rules(self) -> DeactivateRulesBuilder:
        return DeactivateRulesBuilder(self._deactivate_rules)

    async def _deactivate_rules(self, params: dict[str, Any]) -> BulkRuleChangeResponse:
        data = await self._post("/api/qualityprofiles/deactivate_rules", data=params)
        return BulkRuleChangeResponse(**data)

    def changelog(self) -> ProfileChangelogBuilder:
        return ProfileChangelogBuilder(self._changelog)

    async def _changelog(self, params: dict[str, Any]) -> ProfileChangelogResponse:
        data = await self._get("/api/qualityprofiles/changelog", params=self._with_organization(params))
        return ProfileChangelogResponse(**data)

    def projects(self) -> ProfileProjectsBuilder:
        return ProfileProjectsBuilder(self._projects)

    async def _projects(self, params: dict[str, Any]) -> ProfileProjectsResponse:
        data = await self._get("/api/qualityprofiles/projects", params=params)
        return ProfileProjectsResponse(**data)

    async def add_project(
        self,
        *,
        project: str | None = None,
        project_uuid: str | None = None,
        key: str | None = None,
        quality_profile: str | None = None,
        language: str | None = None,
    ) -> None:
        """Associate a project with a profile.

        Raises:
            SonarQubeValidationError: Profile or project not identified
        """
        params = {**profile_params(key, quality_profile, language), "project": project, "projectUuid": project_uuid}
        validate_one_of_required(params, "project", "projectUuid")
        await self._post("/api/qualityprofiles/add_project", data=self._with_organization(params))

    async def remove_project(
        self,
        *,
        project: str | None = None,
        project_uuid: str | None = None,
        key: str | None = None,
        quality_profile: str | None = None,
        language: str | None = None,
    ) -> None:
        """Remove a project's association with a profile.

        Raises:
            SonarQubeValidationError: Profile or project not identified
        """
        params = {**profile_params(key, quality_profile, language), "project": project, "projectUuid": project_uuid}
        validate_one_of_required(params, "project", "projectUuid")
        await self._post("/api/qualityprofiles/remove_project", data=self._with_organization(params))

    async def change_parent(
        self,
        key: str | None = None,
        quality_profile: str | None = None,
        language: str | None = None,
        parent_key: str | None = None,
        parent_quality_profile: str | None = None,
    ) -> None:
        """Change or remove (no parent given) the parent of a profile."""
        params = {
            **profile_params(key, quality_profile, language),
            "parentKey": parent_key,
            "parentQualityProfile": parent_quality_profile,
        }
        await self._post("/api/qualityprofiles/change_parent", data=self._with_organization(params))

    async def inheritance(
        self,
        key: str | None = None,
        quality_profile: str | None = None,
        language: str | None = None,
    ) -> InheritanceResponse:
        params = profile_params(key, quality_profile, language)
        data = await self._get("/api/qualityprofiles/inheritance", params=self._with_organization(params))
        return InheritanceResponse(**data)

    async def compare(self, left_key: str, right_key: str) -> CompareResponse:
        data = await self._get("/api/qualityprofiles/compare", params={"leftKey": left_key, "rightKey": right_key})
        return CompareResponse(**data)

    async def backup(
        self,
        key: str | None = None,
        quality_profile: str | None = None,
        language: str | None = None,
    ) -> str:
        """Back up a profile as XML.

        Returns:
            XML document accepted by the restore endpoint
        """
        params = profile_params(key, quality_profile, language)
        return await self._get(
            "/api/qualityprofiles/backup",
            params=self._with_organization(params),
            headers={"Accept": "application/xml"},
            response_type="text",
        )

    @deprecated(
        "This endpoint will be removed",
        replacement="backup()",
        deprecated_since="10.8",
        removal_date="2025-03-18",
        tags=["quality-profiles"],
    )
    async def exporters(self) -> list[ProfileFormat]:
        data = await self._get("/api/qualityprofiles/exporters")
        return [ProfileFormat.model_validate(item) for item in data.get("exporters", [])]

    @deprecated(
        "This endpoint will be removed",
        deprecated_since="10.8",
        removal_date="2025-03-18",
        tags=["quality-profiles"],
    )
    async def importers(self) -> list[ProfileFormat]:
        data = await self._get("/api/qualityprofiles/importers")
        return [ProfileFormat.model_validate(item) for item in data.get("importers", [])]
