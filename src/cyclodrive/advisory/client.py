"""
Client for the remote design advisory service.

The service is an opaque text-generation endpoint with no correctness
contract. The client sends one request per call:

    POST {base_url}/generate
    Authorization: Bearer {api_key}
    {"model": ..., "system": ..., "prompt": ..., "history": [...],
     "response_format": "text" | "json"}

and expects ``{"text": "..."}`` back. Every failure - missing or
malformed configuration, transport errors, error status, malformed
bodies - is turned into an ``available=False`` result. Callers never see
transport or settings exceptions.
"""

import json
import logging
from typing import Dict, List, Optional

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from ..io.loaders import DesignParameters
from .settings import AdvisorySettings

logger = logging.getLogger(__name__)

ENGINEER_SYSTEM_PROMPT = (
    "You are a senior mechanical engineer specializing in gearbox design. "
    "You provide helpful, technical, but accessible advice on cycloidal drives, "
    "gear ratios, and 3D printing gears."
)


class AdvisoryResult(BaseModel):
    """Prose answer from the advisory service."""
    model_config = ConfigDict(frozen=True)

    available: bool
    text: str = ""
    reason: Optional[str] = None  # Why the service was unavailable


class GeneratedDesign(BaseModel):
    """Candidate design proposed by the advisory service."""
    model_config = ConfigDict(frozen=True)

    available: bool
    params: Optional[DesignParameters] = None
    reasoning: str = ""
    reason: Optional[str] = None


class ChatTurn(BaseModel):
    role: str  # "user" | "model"
    text: str


def build_analysis_prompt(params: DesignParameters, min_wall_thickness: float) -> str:
    """Prompt asking for a short engineering assessment of a design."""
    return f"""Analyze this Cycloidal Drive design configuration for manufacturability and performance.

Parameters:
- Number of Pins: {params.pin_count}
- Pin Circle Radius: {params.pin_circle_radius} mm
- Pin Radius: {params.pin_radius} mm
- Eccentricity: {params.eccentricity} mm
- Center Hole Radius: {params.hole_radius} mm
- Manufacturing Tolerance (Profile Gap): {params.tolerance} mm
- Hole Tolerance: {params.hole_tolerance} mm

Calculated Metrics:
- Minimum Wall Thickness (Profile to Center Hole): {min_wall_thickness:.3f} mm
- Reduction Ratio: {params.pin_count - 1}:1

Please provide a concise engineering assessment.
1. Is the wall thickness sufficient for 3D printing (PLA/PETG) or CNC aluminum?
2. Is the eccentricity reasonable for this scale?
3. Warning about undercutting if applicable.
4. Estimated torque capability level (Low/Medium/High) based on geometry.
5. Are the selected tolerances appropriate for standard FDM printing?

Format as Markdown. Keep it under 200 words."""


def build_generation_prompt(requirements: str) -> str:
    """Prompt asking for a parameter set matching free-text requirements."""
    return f"""Generate a valid set of Cycloidal Drive parameters based on this user requirement: "{requirements}".

Geometric Constraints to enforce:
1. pinRadius should generally be less than (pinCircleRadius / pinCount).
2. eccentricity must be small enough to prevent self-intersection (looping). A safe heuristic is eccentricity < pinRadius * 0.7.
3. pinCount must be an integer >= 4.
4. pinCircleRadius > holeRadius + pinRadius.

Manufacturing Context (Apply these if user mentions specific machines):
- If user mentions "Bambu Lab", "Prusa", or "High Quality FDM", set tolerance 0.08-0.1mm.
- If "CNC" or "Metal", set tolerance 0.02-0.05mm.
- If "Standard FDM" or generic "3D print", set tolerance 0.15-0.2mm.
- If "Resin", set tolerance 0.05mm.

Return JSON: {{"params": {{"pinCount", "pinCircleRadius", "pinRadius", "eccentricity", "holeRadius", "resolution", "tolerance", "holeTolerance"}}, "reasoning": "max 50 words"}}"""


def _strip_code_fence(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        text = text.split("\n", 1)[1] if "\n" in text else ""
        if text.rstrip().endswith("```"):
            text = text.rstrip()[:-3]
    return text.strip()


def _normalize_keys(data: Dict) -> Dict:
    """Map camelCase aliases onto DesignParameters field names."""
    alias_to_name = {
        (info.alias or name): name
        for name, info in DesignParameters.model_fields.items()
    }
    return {alias_to_name.get(key, key): value for key, value in data.items()}


class AdvisoryClient:
    """
    Thin, failure-tolerant client for the advisory service.

    Args:
        settings: Connection settings (default: read from the environment)
        transport: Optional httpx transport, e.g. httpx.MockTransport in tests
    """

    def __init__(
        self,
        settings: Optional[AdvisorySettings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._settings = settings
        self._transport = transport

    @property
    def settings(self) -> AdvisorySettings:
        """Connection settings, read from the environment on first use.

        Raises:
            ValidationError: If an environment value is malformed
        """
        if self._settings is None:
            self._settings = AdvisorySettings()
        return self._settings

    def _request(
        self,
        prompt: str,
        system: Optional[str] = None,
        history: Optional[List[ChatTurn]] = None,
        response_format: str = "text",
    ) -> AdvisoryResult:
        try:
            settings = self.settings
        except ValidationError as e:
            logger.warning(f"Advisory settings invalid: {e}")
            return AdvisoryResult(available=False, reason="Advisory settings are invalid")

        if not settings.configured:
            return AdvisoryResult(
                available=False,
                reason="Advisory service is not configured (base URL or API key missing)",
            )

        payload = {
            "model": settings.model,
            "system": system,
            "prompt": prompt,
            "history": [turn.model_dump() for turn in (history or [])],
            "response_format": response_format,
        }

        try:
            with httpx.Client(
                base_url=settings.base_url,
                timeout=settings.timeout_s,
                transport=self._transport,
                headers={"Authorization": f"Bearer {settings.api_key}"},
            ) as client:
                response = client.post("/generate", json=payload)
                response.raise_for_status()
                text = response.json()["text"]
        except httpx.HTTPError as e:
            logger.warning(f"Advisory request failed: {e}")
            return AdvisoryResult(available=False, reason=f"Advisory service unavailable: {e}")
        except (ValueError, KeyError, TypeError) as e:
            logger.warning(f"Advisory response malformed: {e}")
            return AdvisoryResult(available=False, reason="Advisory service returned a malformed response")

        if not isinstance(text, str) or not text.strip():
            return AdvisoryResult(available=False, reason="Advisory service returned no text")

        return AdvisoryResult(available=True, text=text)

    def analyze_design(self, params: DesignParameters, min_wall_thickness: float) -> AdvisoryResult:
        """Ask for a prose engineering assessment of a design."""
        return self._request(build_analysis_prompt(params, min_wall_thickness))

    def chat(self, history: List[ChatTurn], message: str) -> AdvisoryResult:
        """Continue a conversation with the engineering assistant."""
        return self._request(message, system=ENGINEER_SYSTEM_PROMPT, history=history)

    def generate_design(
        self,
        requirements: str,
        base: Optional[DesignParameters] = None,
    ) -> GeneratedDesign:
        """
        Ask for a parameter set matching free-text requirements.

        The service only proposes the core disc fields; everything else
        (output stage, drive configuration) is taken from ``base`` so the
        result is always a complete DesignParameters.

        Args:
            requirements: Free-text description of the desired drive
            base: Design supplying fields the service leaves out
                (default: the standard preset)
        """
        if base is None:
            from ..calculator.presets import DEFAULT_PARAMS
            base = DEFAULT_PARAMS

        result = self._request(build_generation_prompt(requirements), response_format="json")
        if not result.available:
            return GeneratedDesign(available=False, reason=result.reason)

        try:
            data = json.loads(_strip_code_fence(result.text))
            proposed = _normalize_keys(dict(data["params"]))
            merged = {**base.model_dump(), **proposed}
            params = DesignParameters.model_validate(merged)
            reasoning = str(data.get("reasoning", ""))
        except (ValueError, KeyError, TypeError, ValidationError) as e:
            logger.warning(f"Advisory design proposal unusable: {e}")
            return GeneratedDesign(
                available=False,
                reason="Advisory service returned an unusable design proposal",
            )

        return GeneratedDesign(available=True, params=params, reasoning=reasoning)
