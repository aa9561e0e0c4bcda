from typing import Optional, Sequence

UPLOAD_CORRECT_IMAGE = "Upload the correct image of ingredients"

MATCHED_ALLERGENS_PROMPT = """If the ingredients listed here are not food ingredients, reply only with: {upload_message}.
I have allergies to: {matched}. I found these ingredients in a food product: {ingredients}.
Please explain the potential risks, symptoms I might experience, and what medications or treatments I should consider.
Also provide advice on alternatives to this food."""

SAFETY_CHECK_PROMPT = """I have allergies to: {allergies}. I found these ingredients in a food product: {ingredients}.
Based on these ingredients, are they safe for me to consume? Please provide a brief analysis."""

MEAL_RECOMMENDATIONS_PROMPT = """I have allergies to: {allergies}.
Please suggest 5 {meal_type} recipes{cuisine_clause} that are safe for me to eat.
For each recipe, provide:
1. Recipe name
2. Brief description
3. Key ingredients (that are safe for my allergies)
4. Basic preparation steps
5. Any specific allergy-related notes or substitutions

Format the response in a clear, structured way."""

MENU_ANALYSIS_PROMPT = """I have allergies to: {allergies}.
Here is a restaurant menu:

{menu_text}

Please analyze each menu item and:
1. Identify items that are likely safe for me to eat
2. Flag items that might contain my allergens
3. Suggest modifications to make risky items safe (if possible)
4. Provide general advice for dining at this restaurant

Format the response in clear sections."""


def build_ingredient_prompt(ingredients: Sequence[str], allergies: Sequence[str], matched: Sequence[str]) -> str:
    if matched:
        return MATCHED_ALLERGENS_PROMPT.format(
            upload_message=UPLOAD_CORRECT_IMAGE,
            matched=", ".join(matched),
            ingredients=", ".join(ingredients),
        )
    return SAFETY_CHECK_PROMPT.format(
        allergies=", ".join(allergies),
        ingredients=", ".join(ingredients),
    )


def build_meal_prompt(allergies: Sequence[str], meal_type: str, cuisine: Optional[str] = None) -> str:
    return MEAL_RECOMMENDATIONS_PROMPT.format(
        allergies=", ".join(allergies),
        meal_type=meal_type,
        cuisine_clause=f" from {cuisine} cuisine" if cuisine else "",
    )


def build_menu_prompt(menu_text: str, allergies: Sequence[str]) -> str:
    return MENU_ANALYSIS_PROMPT.format(allergies=", ".join(allergies), menu_text=menu_text)
