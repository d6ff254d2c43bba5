"""
Trait Engine Tests

Verify:
1. Passion score: markers, exclamation cap, length bonus, rounding, clamp
2. Big Five: baselines, weights, neuroticism accumulation, clamp
3. Archetype: composites, threshold bonuses, fixed tie-break order
4. Tags: weighting, niche/stop-word exclusion, title-casing, fallback padding
5. Deep hooks: templates, story triggers, truncation
6. Orchestrator: totality and determinism
"""

import pytest

from passion.features.traits import engine, keywords
from passion.models.traits import Archetype, Big5, TraitAnalysis


KEYBOARD_TRANSCRIPT = "I love mechanical keyboards! It's fascinating."


def neutral_big5(**overrides) -> Big5:
    values = dict(openness=50, conscientiousness=50, extraversion=50, agreeableness=50, neuroticism=50)
    values.update(overrides)
    return Big5(**values)


class TestCountOccurrences:

    def test_case_insensitive(self):
        assert engine.count_occurrences("LOVE Love love", ["love"]) == 3

    def test_matches_inside_longer_words(self):
        """'loved' and 'lovely' both count for 'love'."""
        assert engine.count_occurrences("I loved it, lovely", ["love"]) == 2

    def test_sums_across_terms(self):
        assert engine.count_occurrences("story happened story", ["story", "happened"]) == 3

    def test_empty_text(self):
        assert engine.count_occurrences("", keywords.ENTHUSIASM_MARKERS) == 0


class TestPassionScore:

    def test_empty_transcript_is_baseline(self):
        assert engine.calculate_passion_score("") == 50

    def test_keyboard_example(self):
        # 50 + love(3) + fascinating(3) + one "!"(2) + 6 words / 20
        score = engine.calculate_passion_score(KEYBOARD_TRANSCRIPT)
        assert score == 58
        assert 50 < score <= 100

    def test_substring_marker_counts(self):
        assert engine.calculate_passion_score("loved") == 53

    def test_exclamation_contribution_capped(self):
        assert engine.calculate_passion_score("!!!!!!!!!!") == 65

    def test_story_markers_weigh_four(self):
        # "remember when" + "happened", 4 words
        assert engine.calculate_passion_score("remember when it happened") == 58

    def test_detail_markers_weigh_two(self):
        assert engine.calculate_passion_score("technically") == 52

    def test_length_bonus_capped(self):
        transcript = " ".join(["word"] * 400)
        assert engine.calculate_passion_score(transcript) == 65

    def test_half_rounds_up(self):
        # 10 words => +0.5
        assert engine.calculate_passion_score("aa bb cc dd ee ff gg hh ii jj") == 51

    def test_clamped_to_100(self):
        assert engine.calculate_passion_score("love " * 100) == 100

    def test_deterministic(self):
        text = "This one time I built an amazing keyboard!"
        assert engine.calculate_passion_score(text) == engine.calculate_passion_score(text)


class TestBig5:

    def test_empty_transcript_baselines(self):
        big5 = engine.estimate_big5("")
        assert big5.model_dump() == {
            "openness": 50,
            "conscientiousness": 50,
            "extraversion": 50,
            "agreeableness": 50,
            "neuroticism": 30,
        }

    def test_each_hit_adds_five(self):
        big5 = engine.estimate_big5("curious and creative")
        assert big5.openness == 60
        assert big5.conscientiousness == 50

    def test_neuroticism_accumulates_directly(self):
        big5 = engine.estimate_big5("I worry, stress and feel anxious")
        assert big5.neuroticism == 54

    def test_love_feeds_agreeableness(self):
        assert engine.estimate_big5(KEYBOARD_TRANSCRIPT).agreeableness == 55

    def test_scores_clamped(self):
        big5 = engine.estimate_big5("people scared " * 40)
        assert big5.extraversion == 100
        assert big5.neuroticism == 100

    def test_traits_independent(self):
        """All five may be high at once."""
        text = "unique research social grateful nervous " * 20
        big5 = engine.estimate_big5(text)
        assert all(value == 100 for value in big5.model_dump().values())


class TestArchetype:

    def test_scores_in_fixed_order(self):
        scores = engine.archetype_scores("", neutral_big5())
        assert list(scores.keys()) == list(Archetype)

    def test_builder_transcript(self):
        text = "I build and craft. Build, craft, build."
        big5 = engine.estimate_big5(text)
        assert engine.classify_archetype(text, big5) == Archetype.QUIET_BUILDER

    def test_all_zero_resolves_to_storyteller(self):
        """No keyword hits and no thresholds crossed: first declared wins."""
        assert engine.classify_archetype("", neutral_big5()) == Archetype.STORYTELLER

    def test_empty_transcript_with_baseline_big5(self):
        """Baseline neuroticism (30) is under 40, which gives the analyst bonus."""
        big5 = engine.estimate_big5("")
        scores = engine.archetype_scores("", big5)
        assert scores[Archetype.CALM_ANALYST] == 3
        assert engine.classify_archetype("", big5) == Archetype.CALM_ANALYST

    @pytest.mark.parametrize("text", ["story build", "build story"])
    def test_tie_goes_to_earlier_archetype(self, text):
        assert engine.classify_archetype(text, neutral_big5()) == Archetype.STORYTELLER

    def test_big5_bonuses(self):
        big5 = neutral_big5(
            openness=61, conscientiousness=61, extraversion=61, agreeableness=61, neuroticism=39
        )
        scores = engine.archetype_scores("", big5)
        assert scores == {
            Archetype.STORYTELLER: 5,
            Archetype.QUIET_BUILDER: 5,
            Archetype.CURIOUS_EXPLORER: 5,
            Archetype.WARM_CONNECTOR: 8,
            Archetype.CALM_ANALYST: 6,
        }

    def test_low_extraversion_favors_builder(self):
        scores = engine.archetype_scores("", neutral_big5(extraversion=40))
        assert scores[Archetype.QUIET_BUILDER] == 3

    def test_connector_transcript(self):
        text = "I share with friends and people in the community, we connect together"
        big5 = engine.estimate_big5(text)
        assert engine.classify_archetype(text, big5) == Archetype.WARM_CONNECTOR

    def test_always_a_known_label(self):
        for text in ["", "!!!", "worry " * 50, KEYBOARD_TRANSCRIPT]:
            result = engine.classify_archetype(text, engine.estimate_big5(text))
            assert result in set(Archetype)


class TestTags:

    def test_empty_transcript_fallback(self):
        assert engine.extract_tags("", "knitting") == ["knitting", "Enthusiast", "Deep Diver"]

    def test_keyboard_example(self):
        tags = engine.extract_tags(KEYBOARD_TRANSCRIPT, "mechanical keyboards")
        assert tags == [
            "Love Mechanical Keyboards!",
            "Mechanical Keyboards! It's",
            "Keyboards! It's Fascinating.",
            "Love Mechanical",
            "Mechanical Keyboards!",
        ]

    def test_only_first_letter_uppercased(self):
        tags = engine.extract_tags("it's it's it's", "x")
        assert "It's It's It's" in tags
        assert all("'S" not in tag for tag in tags)

    def test_partial_fallback_pads_to_three(self):
        # Final token is only counted inside a pair
        assert engine.extract_tags("gold silver", "coins") == ["Gold Silver", "Gold", "coins"]

    def test_niche_words_excluded_as_single_tags(self):
        tags = engine.extract_tags("keyboards keyboards keyboards switches", "keyboards")
        assert "Keyboards" not in tags
        assert tags == [
            "Keyboards Keyboards",
            "Keyboards Keyboards Keyboards",
            "Keyboards Keyboards Switches",
            "Keyboards Switches",
        ]

    def test_stop_words_only_falls_back(self):
        assert engine.extract_tags("really really really", "tea") == ["tea", "Enthusiast", "Deep Diver"]

    def test_short_words_not_single_tags(self):
        tags = engine.extract_tags("cat cat cat cat", "pets")
        assert "Cat" not in tags

    def test_fallback_not_deduplicated(self):
        tags = engine.extract_tags("enthusiast", "Enthusiast")
        assert tags == ["Enthusiast", "Enthusiast", "Deep Diver"]

    def test_at_most_five(self):
        text = "woodworking joinery dovetail chisels planes hand tools sharpening stones " * 3
        tags = engine.extract_tags(text, "woodworking")
        assert 3 <= len(tags) <= 5

    @pytest.mark.parametrize("transcript,niche", [
        ("", ""),
        ("   ", "  "),
        ("one", "one"),
        ("a b c d e f", "a b c d e f"),
        (KEYBOARD_TRANSCRIPT, KEYBOARD_TRANSCRIPT),
    ])
    def test_three_to_five_for_degenerate_inputs(self, transcript, niche):
        assert 3 <= len(engine.extract_tags(transcript, niche)) <= 5


class TestDeepHooks:

    def test_two_tags_and_niche(self):
        hooks = engine.generate_deep_hooks("", ["Gold Silver", "Gold", "coins"], "coins")
        assert hooks == [
            "What's the story behind your interest in gold silver?",
            "How did you first discover gold?",
            "If you could spend an entire day pursuing coins, what would you do?",
        ]

    def test_no_tags_only_niche_question(self):
        assert engine.generate_deep_hooks("", [], "knitting") == [
            "If you could spend an entire day pursuing knitting, what would you do?",
        ]

    def test_experience_trigger_case_insensitive(self):
        hooks = engine.generate_deep_hooks("THIS ONE TIME at the meetup", ["Meetups"], "keyboards")
        assert hooks[-1] == "Tell me more about your favorite keyboards experience!"
        assert len(hooks) == 3

    def test_fourth_hook_dropped(self):
        hooks = engine.generate_deep_hooks("what an experience", ["A", "B", "C"], "tea")
        assert len(hooks) == 3
        assert not any(hook.startswith("Tell me more") for hook in hooks)

    def test_empty_transcript_uses_fallback_tags(self):
        tags = engine.extract_tags("", "knitting")
        hooks = engine.generate_deep_hooks("", tags, "knitting")
        assert hooks == [
            "What's the story behind your interest in knitting?",
            "How did you first discover enthusiast?",
            "If you could spend an entire day pursuing knitting, what would you do?",
        ]


class TestAnalyzeTranscript:

    def test_returns_trait_analysis(self):
        result = engine.analyze_transcript(KEYBOARD_TRANSCRIPT, "mechanical keyboards")
        assert isinstance(result, TraitAnalysis)
        assert result.passion_score == 58
        assert result.archetype == Archetype.CALM_ANALYST
        assert len(result.deep_hooks) == 3

    def test_identical_calls_identical_output(self):
        first = engine.analyze_transcript(KEYBOARD_TRANSCRIPT, "mechanical keyboards")
        second = engine.analyze_transcript(KEYBOARD_TRANSCRIPT, "mechanical keyboards")
        assert first == second
        assert first.model_dump_json() == second.model_dump_json()

    @pytest.mark.parametrize("transcript,niche", [
        ("", ""),
        ("", "knitting"),
        ("!" * 500, "shouting"),
        ("worry stress anxious nervous afraid scared " * 30, "calm"),
        ("\n\t  \n", "whitespace"),
    ])
    def test_total_and_bounded(self, transcript, niche):
        result = engine.analyze_transcript(transcript, niche)
        assert 0 <= result.passion_score <= 100
        assert all(0 <= value <= 100 for value in result.big5.model_dump().values())
        assert 3 <= len(result.tags) <= 5
        assert 1 <= len(result.deep_hooks) <= 3

    def test_public_dict_keys(self):
        public = engine.analyze_transcript("", "knitting").to_public_dict()
        assert set(public.keys()) == {"big5", "passionScore", "archetype", "tags", "deepHooks"}
        assert public["archetype"] == "Calm Analyst"
