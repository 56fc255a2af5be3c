import pytest
from pydantic import ValidationError

from memory.extractors import ResumeSignalExtractor, resume_extractor


@pytest.fixture
def extractor():
    return ResumeSignalExtractor()


class TestYearsOfExperience:
    def test_takes_maximum_of_all_mentions(self, extractor):
        resume = "Spent 3 years at Acme, 7+ yrs at Initech and 1 year freelancing."
        assert extractor.extract_years_experience(resume) == 7

    def test_zero_without_mentions(self, extractor):
        assert extractor.extract_years_experience("Enthusiastic engineer.") == 0

    def test_case_insensitive(self, extractor):
        assert extractor.extract_years_experience("12 YEARS in industry") == 12


class TestSkillsAndTools:
    def test_skills_across_categories(self, extractor):
        resume = "Built apps with React and Node.js, deployed on AWS using Docker."
        assert extractor.extract_skills(resume) == ["React", "Node.js", "AWS", "Docker"]

    def test_duplicates_collapsed_in_category_order(self, extractor):
        resume = "Python and React. More Python."
        assert extractor.extract_skills(resume) == ["React", "Python"]

    def test_javascript_is_not_split_into_java(self, extractor):
        assert extractor.extract_skills("JavaScript developer") == ["JavaScript"]

    def test_names_match_inside_words(self, extractor):
        assert extractor.extract_skills("Worked at Google") == ["Go"]

    def test_tools(self, extractor):
        resume = "Tested with Jest and Cypress, tracked in Jira."
        assert extractor.extract_tools(resume) == ["Jira", "Jest", "Cypress"]

    def test_no_matches_is_empty(self, extractor):
        assert extractor.extract_skills("Hardworking person who enjoys puzzles.") == []
        assert extractor.extract_tools("Hardworking person who enjoys puzzles.") == []


class TestStatements:
    def test_projects(self, extractor):
        resume = "I built a payment service. Led a team of 4."
        assert extractor.extract_projects(resume) == ["built a payment service."]

    def test_sentence_in_several_claim_classes(self, extractor):
        analysis = extractor.analyze("Senior engineer who built the best platform.", "backend")
        assert analysis.strong_claims == (
            "Senior engineer who built the best platform.",
            "Senior engineer who built the best platform.",
        )
        assert analysis.exaggerations == ("Senior engineer who built the best platform.",)
        assert analysis.vague_statements == ()

    def test_vague_statements(self, extractor):
        analysis = extractor.analyze("Familiar with several tools.", "data")
        assert len(analysis.vague_statements) == 2

    def test_exaggerations_per_keyword_group(self, extractor):
        analysis = extractor.analyze(
            "I am a world-class engineer. Delivered perfect results. Plain sentence.", "data"
        )
        assert len(analysis.exaggerations) == 2

    def test_one_match_per_sentence_not_per_keyword(self, extractor):
        analysis = extractor.analyze("Best top engineer.", "data")
        assert analysis.exaggerations == ("Best top engineer.",)


class TestMismatches:
    def test_no_skills_means_every_requirement_missing(self, extractor):
        analysis = extractor.analyze("Hardworking person who enjoys puzzles.", "backend")
        assert analysis.skills == ()
        assert analysis.mismatches == tuple(ResumeSignalExtractor.ROLE_REQUIREMENTS["backend"])

    def test_role_lookup_ignores_case(self, extractor):
        assert extractor.find_mismatches([], "Backend") == ResumeSignalExtractor.ROLE_REQUIREMENTS["backend"]

    def test_partial_coverage(self, extractor):
        analysis = extractor.analyze("Docker and Kubernetes on AWS.", "devops")
        assert analysis.mismatches == ("CI/CD", "Azure", "GCP")

    def test_requirement_covered_by_substring(self, extractor):
        mismatches = extractor.find_mismatches(["JavaScript"], "backend")
        assert "Java" not in mismatches
        assert mismatches == ["Node.js", "Express", "Python", "Databases", "APIs"]

    def test_unknown_role(self, extractor):
        assert extractor.find_mismatches([], "astronaut") == []


def test_analysis_is_immutable(sample_resume):
    analysis = resume_extractor.analyze(sample_resume, "fullstack")
    assert analysis.years_experience == 6
    with pytest.raises(ValidationError):
        analysis.years_experience = 1


def test_analysis_lists_cannot_be_mutated(sample_resume):
    analysis = resume_extractor.analyze(sample_resume, "fullstack")
    assert isinstance(analysis.skills, tuple)
    with pytest.raises(AttributeError):
        analysis.skills.append("COBOL")
    assert "COBOL" not in analysis.skills
