from allergyscan.modules.analysis.prompts import (
    UPLOAD_CORRECT_IMAGE, build_ingredient_prompt, build_meal_prompt, build_menu_prompt,
)


def test_matched_prompt_names_only_matched_allergies():
    prompt = build_ingredient_prompt(["milk", "sugar"], ["milk", "soy"], ["milk"])
    assert prompt.startswith("If the ingredients listed here are not food ingredients")
    assert "I have allergies to: milk." in prompt
    assert "milk, sugar" in prompt
    assert "potential risks" in prompt
    assert UPLOAD_CORRECT_IMAGE in prompt


def test_safe_prompt_lists_every_allergy():
    prompt = build_ingredient_prompt(["oats", "sugar"], ["milk", "soy"], [])
    assert "I have allergies to: milk, soy." in prompt
    assert "are they safe for me to consume" in prompt


def test_meal_prompt_with_and_without_cuisine():
    with_cuisine = build_meal_prompt(["peanut"], "dinner", "Thai")
    assert "5 dinner recipes from Thai cuisine" in with_cuisine
    without = build_meal_prompt(["peanut"], "lunch")
    assert "5 lunch recipes that are safe" in without


def test_menu_prompt_embeds_full_menu_text():
    menu = "Pad Thai .... 12\nGreen Curry .... 14"
    prompt = build_menu_prompt(menu, ["peanut", "shrimp"])
    assert menu in prompt
    assert "peanut, shrimp" in prompt
