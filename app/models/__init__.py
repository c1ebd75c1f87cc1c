from app.models.profile import (
    CareerSelection,
    CollegeSuggesterForm,
    CompanyAlternativesForm,
    CompanySuggesterForm,
    ExplorerForm,
    LearningStyle,
    SchoolProfile,
    StudentProfile,
)
from app.models.results import (
    CareerExplorationResult,
    CareerRecommendationResult,
    CollegeAlternative,
    CollegeAlternativesResult,
    CollegeSuggestion,
    CollegeSuggestionResult,
    CompanyAlternative,
    CompanyAlternativesResult,
    CompanySuggestion,
    CompanySuggestionResult,
    InstitutionType,
    RoadmapMilestone,
    RoadmapResult,
    SchoolRoadmapMilestone,
    SchoolRoadmapResult,
    SkillGapResult,
    SkillRequirement,
)
from app.models.session import CareerSessionView, Notification, SchoolTrackResult
