from __future__ import annotations

from typing import Sequence

from sitesmith.backend.app.application.generation.interfaces import AssetRef

CREATE_SYSTEM = (
    "You are an expert website generator. You build complete, modern, accessible and "
    "fully responsive single-page websites.\n"
    "- Return ONE complete standalone HTML document and nothing else.\n"
    "- Use Tailwind CSS via CDN for styling and Vue.js 3 (global build via CDN, Options API) "
    "for interactivity, mounted on <div id=\"app\">.\n"
    "- Use semantic HTML5, one <h1>, alt text on every image, labels on every input, "
    "visible focus states and lang=\"en\" on <html>.\n"
    "- Delimit major sections with <!-- name begin --> and <!-- name end --> comments.\n"
    "- Only use image URLs listed under ASSETS_TO_USE."
)

UPDATE_SYSTEM = (
    "You are an expert website updater. You receive an existing single-page website and "
    "change it according to the instructions.\n"
    "- Return the FULL updated HTML document and nothing else.\n"
    "- Keep the overall structure, design and unrelated sections intact.\n"
    "- Keep the Vue.js application script working; do not remove sections you were not asked to change.\n"
    "- Keep or add <!-- name begin --> / <!-- name end --> comments around changed sections."
)

SECTION_SYSTEM = (
    "You generate the HTML for ONE section of an existing single-page website built with "
    "Tailwind CSS and Vue.js 3 (global build, Options API).\n"
    "- Output only the section markup, wrapped in <!-- {section} begin --> and "
    "<!-- {section} end --> comments.\n"
    "- Assume the main Vue instance already exists; keep the section accessible."
)

STITCH_SYSTEM = (
    "You replace one section of an HTML document.\n"
    "1. Find the block between <!-- {section} begin --> and <!-- {section} end -->.\n"
    "2. Replace that block, markers included, with the new section content.\n"
    "3. If the markers are missing, put the new section where it belongs semantically.\n"
    "4. Do not modify any other part of the document, especially <script> tags.\n"
    "Return the complete HTML document and nothing else."
)

CAPTION_PROMPT = (
    "For the following image, provide a detailed English description for use as metadata. "
    "Format your response as follows:\n"
    "Caption: [a concise, descriptive caption]\n"
    "Quality: [sharpness, clarity, noise, compression artifacts]\n"
    "Color Palette: [dominant and secondary colors, gradients, contrasts]\n"
    "Color Palette in hex: [the same palette as hex codes]\n"
    "Respond in English only, with no other commentary."
)


def format_assets(assets: Sequence[AssetRef]) -> str:
    if not assets:
        return "<ASSETS_TO_USE>None</ASSETS_TO_USE>"
    blocks = [
        f"Asset {i}:\nDescription: {a.description}\nURL: {a.url}\nType: {a.content_type}"
        for i, a in enumerate(assets, start=1)
    ]
    return "<ASSETS_TO_USE>\n" + "\n\n".join(blocks) + "\n</ASSETS_TO_USE>"


def format_context(context: str) -> str:
    context = (context or "").strip()
    return f"<ADDITIONAL_CONTEXT>\n{context}\n</ADDITIONAL_CONTEXT>" if context \
        else "<ADDITIONAL_CONTEXT>None</ADDITIONAL_CONTEXT>"
