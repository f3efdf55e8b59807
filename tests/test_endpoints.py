"""Request-shape tests for the endpoint groups."""

import json

import httpx
import pytest

from xilabs_client import DialogueInput, VoiceSettings

from .conftest import json_response, request_json


def audio_response(request: httpx.Request) -> httpx.Response:
    return httpx.Response(200, content=b"ID3audio", headers={"content-type": "audio/mpeg"})


async def chunked(data: bytes, size: int):
    for i in range(0, len(data), size):
        yield data[i:i + size]


class TestTextToSpeech:
    @pytest.mark.asyncio
    async def test_convert(self, make_client) -> None:
        client, requests = make_client(audio_response)

        audio = await client.text_to_speech.convert(
            "voice1",
            "Hello",
            model_id="eleven_turbo_v2_5",
            voice_settings=VoiceSettings(stability=0.4, similarity_boost=0.8),
            output_format="pcm_24000",
            enable_logging=False,
        )

        assert audio == b"ID3audio"
        request = requests[0]
        assert request.url.path == "/v1/text-to-speech/voice1"
        assert dict(request.url.params) == {"enable_logging": "false", "output_format": "pcm_24000"}
        assert request_json(request) == {
            "text": "Hello",
            "model_id": "eleven_turbo_v2_5",
            "voice_settings": {"stability": 0.4, "similarity_boost": 0.8},
        }

    @pytest.mark.asyncio
    async def test_convert_rejects_blank_voice(self, make_client) -> None:
        client, requests = make_client(audio_response)
        with pytest.raises(ValueError, match="voice_id"):
            await client.text_to_speech.convert("  ", "Hello")
        assert requests == []

    @pytest.mark.asyncio
    async def test_convert_with_timestamps(self, make_client) -> None:
        payload = {"audio_base64": "AAAA", "alignment": {}, "normalized_alignment": {}}
        client, requests = make_client(lambda request: json_response(payload))

        result = await client.text_to_speech.convert_with_timestamps("v", "Hi", seed=3)

        assert result == payload
        assert requests[0].url.path == "/v1/text-to-speech/v/with-timestamps"
        assert request_json(requests[0]) == {"text": "Hi", "seed": 3}

    @pytest.mark.asyncio
    async def test_stream_uses_defaults(self, make_client) -> None:
        client, requests = make_client(
            lambda request: httpx.Response(200, content=chunked(b"0123456789", 3))
        )
        received = []

        result = await client.text_to_speech.stream("v", "Hi", received.append)

        assert b"".join(received) == b"0123456789"
        assert result.bytes_received == 10
        request = requests[0]
        assert request.url.path == "/v1/text-to-speech/v/stream"
        assert request.url.params["output_format"] == "mp3_44100_128"
        assert request_json(request)["model_id"] == "eleven_multilingual_v2"

    @pytest.mark.asyncio
    async def test_stream_with_timestamps(self, make_client) -> None:
        lines = b'{"audio_base64":"QQ=="}\n{"audio_base64":"Qg=="}\n'
        client, requests = make_client(
            lambda request: httpx.Response(200, content=chunked(lines, 10))
        )
        events = []

        result = await client.text_to_speech.stream_with_timestamps("v", "Hi", events.append)

        assert [e["audio_base64"] for e in events] == ["QQ==", "Qg=="]
        assert result.events == 2
        assert requests[0].url.path == "/v1/text-to-speech/v/stream/with-timestamps"


class TestTextToDialogue:
    @pytest.mark.asyncio
    async def test_convert(self, make_client) -> None:
        client, requests = make_client(audio_response)

        await client.text_to_dialogue.convert(
            [DialogueInput(text="Hi", voice_id="a"), {"text": "Hello", "voice_id": "b"}],
            model_id="eleven_v3",
        )

        assert requests[0].url.path == "/v1/text-to-dialogue"
        assert request_json(requests[0]) == {
            "inputs": [{"text": "Hi", "voice_id": "a"}, {"text": "Hello", "voice_id": "b"}],
            "model_id": "eleven_v3",
        }

    @pytest.mark.asyncio
    async def test_empty_inputs_rejected(self, make_client) -> None:
        client, _ = make_client(audio_response)
        with pytest.raises(ValueError):
            await client.text_to_dialogue.convert([])

    @pytest.mark.asyncio
    async def test_stream(self, make_client) -> None:
        client, requests = make_client(
            lambda request: httpx.Response(200, content=chunked(b"abc", 1))
        )
        received = []
        await client.text_to_dialogue.stream([{"text": "x", "voice_id": "y"}], received.append)

        assert received == [b"a", b"b", b"c"]
        assert requests[0].url.path == "/v1/text-to-dialogue/stream"
        assert requests[0].url.params["output_format"] == "mp3_44100_128"


class TestAudioEndpoints:
    @pytest.mark.asyncio
    async def test_sound_generation(self, make_client) -> None:
        client, requests = make_client(audio_response)

        await client.sound_generation.generate(
            "Rain on a tin roof", duration_seconds=4.5, loop=True, output_format="mp3_22050_32"
        )

        assert requests[0].url.path == "/v1/sound-generation"
        assert requests[0].url.params["output_format"] == "mp3_22050_32"
        assert request_json(requests[0]) == {
            "text": "Rain on a tin roof",
            "loop": True,
            "duration_seconds": 4.5,
        }

    @pytest.mark.asyncio
    async def test_audio_isolation(self, make_client) -> None:
        client, requests = make_client(audio_response)

        await client.audio_isolation.isolate(b"noisy", "take.wav", file_format="other")

        content = requests[0].content
        assert requests[0].url.path == "/v1/audio-isolation"
        assert b'name="audio"; filename="take.wav"' in content
        assert b'name="file_format"\r\n\r\nother\r\n' in content

    @pytest.mark.asyncio
    async def test_forced_alignment(self, make_client) -> None:
        client, requests = make_client(lambda request: json_response({"words": [], "loss": 0.1}))

        result = await client.forced_alignment.create(b"pcm", "speech.mp3", "Hello world")

        assert result["loss"] == 0.1
        content = requests[0].content
        assert b'name="file"; filename="speech.mp3"' in content
        assert b'name="text"\r\n\r\nHello world\r\n' in content

    @pytest.mark.asyncio
    async def test_music_requires_prompt_or_plan(self, make_client) -> None:
        client, _ = make_client(audio_response)
        with pytest.raises(ValueError):
            await client.music.compose()

    @pytest.mark.asyncio
    async def test_music_detailed_asks_for_multipart(self, make_client) -> None:
        client, requests = make_client(audio_response)

        await client.music.compose_detailed("lofi beat", music_length_ms=30000)

        assert requests[0].url.path == "/v1/music/detailed"
        assert requests[0].headers["accept"] == "multipart/mixed"
        assert request_json(requests[0]) == {
            "prompt": "lofi beat",
            "music_length_ms": 30000,
            "model_id": "music_v1",
        }

    @pytest.mark.asyncio
    async def test_audio_isolation_stream(self, make_client) -> None:
        client, requests = make_client(
            lambda request: httpx.Response(200, content=chunked(b"abcdef", 2))
        )
        received: list[bytes] = []

        result = await client.audio_isolation.isolate_stream(b"noisy", "take.wav", received.append)

        assert received == [b"ab", b"cd", b"ef"]
        assert result.bytes_received == 6
        request = requests[0]
        assert request.url.path == "/v1/audio-isolation/stream"
        assert b'name="audio"; filename="take.wav"' in request.content
        assert b"Content-Type: audio/wav" in request.content

    @pytest.mark.asyncio
    async def test_music_compose_stream(self, make_client) -> None:
        client, requests = make_client(
            lambda request: httpx.Response(200, content=chunked(b"ID3music", 3))
        )
        received: list[bytes] = []

        await client.music.compose_stream(received.append, "lofi beat", output_format="mp3_44100_128")

        assert b"".join(received) == b"ID3music"
        assert requests[0].url.path == "/v1/music/stream"
        assert requests[0].url.params["output_format"] == "mp3_44100_128"
        assert request_json(requests[0])["prompt"] == "lofi beat"


class TestSpeech:
    @pytest.mark.asyncio
    async def test_speech_to_speech_sends_settings_as_json_string(self, make_client) -> None:
        client, requests = make_client(audio_response)

        await client.speech_to_speech.convert(
            "voice1", b"wav", "in.wav", voice_settings={"stability": 0.3}, output_format="mp3_44100_64"
        )

        request = requests[0]
        assert request.url.path == "/v1/speech-to-speech/voice1"
        assert request.url.params["output_format"] == "mp3_44100_64"
        assert b'name="voice_settings"\r\n\r\n{"stability": 0.3}\r\n' in request.content

    @pytest.mark.asyncio
    async def test_speech_to_text_with_file(self, make_client) -> None:
        client, requests = make_client(lambda request: json_response({"text": "hello"}))

        result = await client.speech_to_text.create(
            "scribe_v1",
            file=b"audio",
            filename="memo.m4a",
            diarize=True,
            additional_formats=[{"format": "srt"}],
        )

        assert result == {"text": "hello"}
        content = requests[0].content
        assert b'name="model_id"\r\n\r\nscribe_v1\r\n' in content
        assert b"Content-Type: audio/mp4" in content
        assert b'name="diarize"\r\n\r\ntrue\r\n' in content
        assert b'name="additional_formats"\r\n\r\n[{"format": "srt"}]\r\n' in content

    @pytest.mark.asyncio
    async def test_speech_to_text_needs_exactly_one_source(self, make_client) -> None:
        client, requests = make_client(lambda request: json_response({}))
        with pytest.raises(ValueError):
            await client.speech_to_text.create("scribe_v1")
        with pytest.raises(ValueError):
            await client.speech_to_text.create(
                "scribe_v1", file=b"a", filename="a.mp3", cloud_storage_url="https://x/a.mp3"
            )
        assert requests == []

    @pytest.mark.asyncio
    async def test_speech_to_speech_stream(self, make_client) -> None:
        client, requests = make_client(
            lambda request: httpx.Response(200, content=chunked(b"abcdef", 4))
        )
        received: list[bytes] = []

        result = await client.speech_to_speech.convert_stream(
            "voice1", b"RIFF", "in.wav", received.append, model_id="eleven_multilingual_sts_v2"
        )

        assert received == [b"abcd", b"ef"]
        assert result.chunks == 2
        request = requests[0]
        assert request.url.path == "/v1/speech-to-speech/voice1/stream"
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b'name="audio"; filename="in.wav"' in request.content
        assert b'name="model_id"\r\n\r\neleven_multilingual_sts_v2\r\n' in request.content


class TestHistory:
    @pytest.mark.asyncio
    async def test_list_params(self, make_client) -> None:
        client, requests = make_client(lambda request: json_response({"history": []}))

        await client.history.list(page_size=10, source="TTS")

        assert dict(requests[0].url.params) == {"page_size": "10", "source": "TTS"}

    @pytest.mark.asyncio
    async def test_download(self, make_client) -> None:
        client, requests = make_client(
            lambda request: httpx.Response(200, content=b"PK\x03\x04", headers={"content-type": "application/zip"})
        )

        data = await client.history.download(["h1", "h2"], output_format="wav")

        assert data == b"PK\x03\x04"
        assert request_json(requests[0]) == {"history_item_ids": ["h1", "h2"], "output_format": "wav"}

    @pytest.mark.asyncio
    async def test_get_audio(self, make_client) -> None:
        client, requests = make_client(audio_response)
        assert await client.history.get_audio("h1") == b"ID3audio"
        assert requests[0].url.path == "/v1/history/h1/audio"


class TestDubbingResources:
    @pytest.mark.asyncio
    async def test_segment_operations(self, make_client) -> None:
        client, requests = make_client(lambda request: json_response({"version": 2}))

        await client.dubbing.create_segment("d1", "s1", 1.0, 2.5, text="Hola")
        await client.dubbing.update_segment("d1", "seg1", "es", text="Adios")
        await client.dubbing.delete_segment("d1", "seg1")
        await client.dubbing.translate_segments("d1", ["seg1"], ["es"])
        await client.dubbing.render("d1", "es", "mp4")

        assert [(r.method, r.url.path) for r in requests] == [
            ("POST", "/v1/dubbing/resource/d1/speaker/s1/segment"),
            ("PATCH", "/v1/dubbing/resource/d1/segment/seg1/es"),
            ("DELETE", "/v1/dubbing/resource/d1/segment/seg1"),
            ("POST", "/v1/dubbing/resource/d1/translate"),
            ("POST", "/v1/dubbing/resource/d1/render/es"),
        ]
        assert request_json(requests[0]) == {"start_time": 1.0, "end_time": 2.5, "text": "Hola"}
        assert request_json(requests[1]) == {"text": "Adios"}
        assert request_json(requests[3]) == {"segments": ["seg1"], "languages": ["es"]}
        assert request_json(requests[4]) == {"render_type": "mp4"}

    @pytest.mark.asyncio
    async def test_dubbed_transcript_format(self, make_client) -> None:
        client, requests = make_client(
            lambda request: httpx.Response(200, text="1\n00:00:00,000 --> 00:00:01,000\nHola\n")
        )

        transcript = await client.dubbing.get_dubbed_transcript("d1", "es", format_type="srt")

        assert transcript.startswith(b"1\n")
        assert requests[0].url.path == "/v1/dubbing/d1/transcript/es"
        assert requests[0].url.params["format_type"] == "srt"


class TestAccount:
    @pytest.mark.asyncio
    async def test_character_stats(self, make_client) -> None:
        client, requests = make_client(lambda request: json_response({"time": [], "usage": {}}))

        await client.usage.get_character_stats(
            1700000000000, 1700086400000, include_workspace_metrics=True, breakdown_type="voice"
        )

        assert requests[0].url.path == "/v1/usage/character-stats"
        assert dict(requests[0].url.params) == {
            "start_unix": "1700000000000",
            "end_unix": "1700086400000",
            "include_workspace_metrics": "true",
            "breakdown_type": "voice",
        }


class TestPronunciationDictionaries:
    @pytest.mark.asyncio
    async def test_add_from_rules(self, make_client) -> None:
        client, requests = make_client(lambda request: json_response({"id": "dict1"}))
        rules = [{"type": "alias", "string_to_replace": "XI", "alias": "eleven"}]

        await client.pronunciation_dictionaries.add_from_rules("Brand", rules)

        assert requests[0].url.path == "/v1/pronunciation-dictionaries/add-from-rules"
        assert request_json(requests[0]) == {"name": "Brand", "rules": rules}

    @pytest.mark.asyncio
    async def test_add_from_rules_requires_rules(self, make_client) -> None:
        client, _ = make_client(lambda request: json_response({}))
        with pytest.raises(ValueError, match="rules"):
            await client.pronunciation_dictionaries.add_from_rules("Brand", [])

    @pytest.mark.asyncio
    async def test_download_version(self, make_client) -> None:
        client, requests = make_client(
            lambda request: httpx.Response(200, content=b"<lexicon/>", headers={"content-type": "application/pls+xml"})
        )
        data = await client.pronunciation_dictionaries.download_version("d1", "v2")
        assert data == b"<lexicon/>"
        assert requests[0].url.path == "/v1/pronunciation-dictionaries/d1/v2/download"


class TestWorkspace:
    @pytest.mark.asyncio
    async def test_invite_delete_sends_body(self, make_client) -> None:
        client, requests = make_client(lambda request: json_response({"status": "ok"}))

        await client.workspace_invites.delete("someone@example.com")

        assert requests[0].method == "DELETE"
        assert requests[0].url.path == "/v1/workspace/invites"
        assert request_json(requests[0]) == {"email": "someone@example.com"}

    @pytest.mark.asyncio
    async def test_share_resource(self, make_client) -> None:
        client, requests = make_client(lambda request: json_response({}))

        await client.workspace_resources.share("r1", "editor", "voice", group_id="g1")

        assert requests[0].url.path == "/v1/workspace/resources/r1/share"
        assert request_json(requests[0]) == {
            "role": "editor",
            "resource_type": "voice",
            "group_id": "g1",
        }

    @pytest.mark.asyncio
    async def test_group_search(self, make_client) -> None:
        client, requests = make_client(lambda request: json_response([]))
        await client.workspace_groups.search("Editors")
        assert requests[0].url.params["name"] == "Editors"

    @pytest.mark.asyncio
    async def test_service_account_keys(self, make_client) -> None:
        client, requests = make_client(lambda request: json_response({}))

        await client.service_accounts.create_api_key("sa1", "ci", ["text_to_speech"])
        await client.service_accounts.update_api_key("sa1", "k1", False, "ci", "all")
        await client.service_accounts.delete_api_key("sa1", "k1")

        assert [(r.method, r.url.path) for r in requests] == [
            ("POST", "/v1/service-accounts/sa1/api-keys"),
            ("PATCH", "/v1/service-accounts/sa1/api-keys/k1"),
            ("DELETE", "/v1/service-accounts/sa1/api-keys/k1"),
        ]
        assert request_json(requests[1]) == {"is_enabled": False, "name": "ci", "permissions": "all"}


class TestTextToVoice:
    @pytest.mark.asyncio
    async def test_design_and_create(self, make_client) -> None:
        client, requests = make_client(lambda request: json_response({"previews": []}))

        await client.text_to_voice.design("A warm elderly narrator with a soft rasp", loudness=0.5)
        await client.text_to_voice.create("Narrator", "Warm narrator", "gen1", labels={"age": "old"})

        assert request_json(requests[0]) == {
            "voice_description": "A warm elderly narrator with a soft rasp",
            "loudness": 0.5,
        }
        assert requests[1].url.path == "/v1/text-to-voice"
        assert json.loads(requests[1].content)["generated_voice_id"] == "gen1"

    @pytest.mark.asyncio
    async def test_stream_preview(self, make_client) -> None:
        client, requests = make_client(
            lambda request: httpx.Response(200, content=chunked(b"preview", 3))
        )
        received: list[bytes] = []

        await client.text_to_voice.stream_preview("gen1", received.append)

        assert received == [b"pre", b"vie", b"w"]
        assert requests[0].method == "GET"
        assert requests[0].url.path == "/v1/text-to-voice/gen1/stream"

    @pytest.mark.asyncio
    async def test_list_voices(self, make_client) -> None:
        client, requests = make_client(lambda request: json_response({"voices": []}))

        assert await client.text_to_voice.list_voices() == {"voices": []}
        assert requests[0].url.path == "/v1/voices"


class TestAudioNative:
    @pytest.mark.asyncio
    async def test_create_with_file(self, make_client) -> None:
        client, requests = make_client(lambda request: json_response({"project_id": "p1"}))

        await client.audio_native.create(
            "Blog post", file=b"<p>Hi</p>", filename="post.html", auto_convert=True
        )

        content = requests[0].content
        assert b'name="name"\r\n\r\nBlog post\r\n' in content
        assert b'name="auto_convert"\r\n\r\ntrue\r\n' in content
        assert b"Content-Type: text/html" in content


class TestPathSegments:
    @pytest.mark.asyncio
    async def test_ids_are_escaped(self, make_client) -> None:
        client, requests = make_client(lambda request: json_response({}))

        await client.voices.get("a/b?c#d")
        await client.dubbing.get_dubbed_transcript("dub 1", "en")

        assert requests[0].url.raw_path == b"/v1/voices/a%2Fb%3Fc%23d"
        assert requests[0].url.query == b""
        assert requests[1].url.raw_path.startswith(b"/v1/dubbing/dub%201/transcript/en")
