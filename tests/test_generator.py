"""Test prompt building, file naming and response parsing"""
import unittest
from types import SimpleNamespace

import httpx
import openai

from poster_app.errors import RequestError
from poster_app.generator import (
    build_prompt,
    build_share_payload,
    call_image_api,
    default_client_factory,
    extract_image_url,
    poster_caption,
    poster_filename,
)

from fakes import FakeImages, images_response


class TestPromptAndNames(unittest.TestCase):

    def test_prompt_for_blade_runner(self):
        self.assertEqual(
            build_prompt("Blade Runner", "cyberpunk"),
            'An imaginative poster inspired by the movie "Blade Runner" rendered in the cyberpunk art style',
        )

    def test_prompt_trims_title(self):
        prompt = build_prompt("  Alien \n", "noir")
        self.assertIn('movie "Alien" rendered', prompt)
        self.assertTrue(prompt.endswith("in the noir art style"))

    def test_filename_from_title(self):
        self.assertEqual(poster_filename("The Matrix"), "the-matrix-poster.png")

    def test_filename_collapses_whitespace_runs(self):
        self.assertEqual(poster_filename("Back  to \t the   Future"), "back-to-the-future-poster.png")

    def test_caption(self):
        self.assertEqual(poster_caption("Heat", "pop art"), 'Generated poster for "Heat" in pop art style')

    def test_share_payload(self):
        payload = build_share_payload("Heat", "noir", "https://img.example/heat.png")
        self.assertEqual(payload.title, "AI Movie Poster: Heat")
        self.assertEqual(payload.text, 'Check out this AI-generated movie poster for "Heat" in noir style!')
        self.assertEqual(payload.url, "https://img.example/heat.png")


class TestExtractImageUrl(unittest.TestCase):

    def test_first_descriptor_wins(self):
        response = images_response("https://img.example/1.png", "https://img.example/2.png")
        self.assertEqual(extract_image_url(response), "https://img.example/1.png")

    def test_empty_list_is_request_error(self):
        with self.assertRaises(RequestError):
            extract_image_url(images_response())

    def test_missing_data_is_request_error(self):
        with self.assertRaises(RequestError):
            extract_image_url(SimpleNamespace())

    def test_descriptor_without_url_is_request_error(self):
        with self.assertRaises(RequestError) as ctx:
            extract_image_url(SimpleNamespace(data=[SimpleNamespace(url=None)]))
        self.assertEqual(
            ctx.exception.notification.description,
            "Sorry, an error occurred while generating the poster.",
        )


class TestCallImageApi(unittest.IsolatedAsyncioTestCase):

    async def test_passes_model_and_prompt(self):
        images = FakeImages(response=images_response("https://img.example/a.png"))
        client = SimpleNamespace(images=images)

        response = await call_image_api(client, "dall-e-2", "a prompt")

        self.assertEqual(images.calls, [{"model": "dall-e-2", "prompt": "a prompt"}])
        self.assertEqual(response.data[0].url, "https://img.example/a.png")

    async def test_openai_errors_become_request_errors(self):
        request = httpx.Request("POST", "https://api.openai.com/v1/images/generations")
        images = FakeImages(error=openai.APIConnectionError(request=request))

        with self.assertRaises(RequestError) as ctx:
            await call_image_api(SimpleNamespace(images=images), "dall-e-3", "a prompt")
        self.assertIsInstance(ctx.exception.__cause__, openai.APIConnectionError)

    async def test_error_status_becomes_request_error(self):
        request = httpx.Request("POST", "https://api.openai.com/v1/images/generations")
        response = httpx.Response(400, request=request)
        images = FakeImages(error=openai.BadRequestError("invalid size", response=response, body=None))

        with self.assertRaises(RequestError) as ctx:
            await call_image_api(SimpleNamespace(images=images), "dall-e-3", "a prompt")
        self.assertIsInstance(ctx.exception.__cause__, openai.BadRequestError)

    async def test_default_client_can_be_closed(self):
        client = default_client_factory("sk-test")
        self.assertIsInstance(client, openai.AsyncOpenAI)

        await client.close()
        self.assertTrue(client.is_closed())


if __name__ == "__main__":
    unittest.main()
