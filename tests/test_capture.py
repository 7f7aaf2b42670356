import unittest
from unittest import mock

from quickadd_tmdb.api.tmdb import TMDB
from quickadd_tmdb.core.capture import run, NAME_PROMPT
from quickadd_tmdb.core.host import QuickAdd, QuickAddApi
from quickadd_tmdb.exceptions import MissingDataError, NoResultsError, TMDBRequestError


class ScriptedQuickAddApi(QuickAddApi):
    """Answers prompts from a script and records what was shown."""

    def __init__(self, text, picks):
        self.text = text
        self.picks = list(picks)
        self.prompts = []
        self.labels = []

    def input_prompt(self, message):
        self.prompts.append(message)
        return self.text

    def suggester(self, display, items):
        self.labels.append([display(item) for item in items])
        return items[self.picks.pop(0)]


def make_client(search_response, details):
    session = mock.Mock()
    responses = []
    for body in (search_response, details):
        response = mock.Mock()
        response.json.return_value = body
        responses.append(response)
    session.get.side_effect = responses
    return TMDB("secret", base_url="https://api.themoviedb.org/3", timeout=10, session=session), session


DARK_SEARCH = {"results": [
    {"id": 70523, "name": "Dark", "original_language": "de", "first_air_date": "2017-12-01"},
]}

DARK = {
    "id": 70523,
    "name": "Dark",
    "genres": [{"name": "Drama"}],
    "original_language": "de",
    "first_air_date": "2017-12-01",
    "number_of_episodes": 24,
    "number_of_seasons": 3,
    "vote_average": 8.4,
    "poster_path": "/dark.jpg",
    "seasons": [
        {"name": "Season 1", "season_number": 1, "air_date": "2017-12-01",
         "episode_count": 10, "vote_average": 8.1, "poster_path": "/s1.jpg"},
        {"name": "Season 2", "season_number": 2, "air_date": "2020-05-01",
         "episode_count": 8, "vote_average": 8.3, "poster_path": "/s2.jpg"},
    ],
}


class TestCaptureMovie(unittest.TestCase):

    def test_dune(self):
        client, session = make_client(
            {"results": [{"id": 1, "title": "Dune", "original_language": "en", "release_date": "2021-10-22"}]},
            {"id": 1, "title": "Dune", "genres": [{"name": "Sci-Fi"}], "original_language": "en",
             "release_date": "2021-10-22", "vote_average": 8.0, "poster_path": "/p.jpg"},
        )
        api = ScriptedQuickAddApi("Dune", [0])
        quick_add = QuickAdd(api)

        variables = run(quick_add, {"TMDB_API_KEY": "secret", "type": "movie"}, client=client)

        expected = {
            "genres": "sci-fi",
            "language": "en",
            "title": "dune",
            "release_date": "2021-10-22",
            "tmdb_rating": 8.0,
            "tmdb_poster": "https://image.tmdb.org/t/p/original/p.jpg",
            "tmdb_link": "https://www.themoviedb.org/movie/1",
        }
        self.assertEqual(variables, expected)
        self.assertEqual(quick_add.variables, expected)
        self.assertEqual(api.prompts, [NAME_PROMPT])
        self.assertEqual(api.labels, [["Dune (en, 2021-10-22)"]])

        search_call, details_call = session.get.call_args_list
        self.assertEqual(search_call[0][0], "https://api.themoviedb.org/3/search/movie")
        self.assertEqual(search_call[1]["params"], {"query": "Dune", "api_key": "secret"})
        self.assertEqual(details_call[0][0], "https://api.themoviedb.org/3/movie/1")
        self.assertEqual(details_call[1]["params"], {"api_key": "secret"})


class TestCaptureTvSeries(unittest.TestCase):

    def test_all_seasons(self):
        client, session = make_client(DARK_SEARCH, DARK)
        api = ScriptedQuickAddApi("Dark", [0, 0])

        variables = run(QuickAdd(api), {"TMDB_API_KEY": "secret", "type": "tv"}, client=client)

        self.assertEqual(variables["season"], "all")
        self.assertEqual(variables["number_of_seasons"], 3)
        self.assertEqual(variables["number_of_episodes"], 24)
        self.assertEqual(variables["tmdb_link"], "https://www.themoviedb.org/tv/70523")
        self.assertEqual(api.labels, [["Dark (de, 2017-12-01)"], ["All", "Season 1", "Season 2"]])
        self.assertEqual(session.get.call_args_list[1][0][0], "https://api.themoviedb.org/3/tv/70523")

    def test_second_season(self):
        client, _ = make_client(DARK_SEARCH, DARK)
        api = ScriptedQuickAddApi("Dark", [0, 2])

        variables = run(QuickAdd(api), {"TMDB_API_KEY": "secret", "type": "tv"}, client=client)

        self.assertEqual(variables["season"], 2)
        self.assertEqual(variables["number_of_episodes"], 8)
        self.assertEqual(variables["number_of_seasons"], "n/a")
        self.assertEqual(variables["air_date"], "2020-05-01")
        self.assertEqual(variables["title"], "dark season 2")
        self.assertTrue(variables["tmdb_link"].endswith("/season/2"))


class TestCaptureFailures(unittest.TestCase):

    def test_no_results_fails_before_picker(self):
        client, session = make_client({"results": []}, None)
        api = ScriptedQuickAddApi("zzzz", [])
        quick_add = QuickAdd(api)

        with self.assertRaises(NoResultsError):
            run(quick_add, {"TMDB_API_KEY": "secret", "type": "movie"}, client=client)

        self.assertEqual(api.labels, [])
        self.assertIsNone(quick_add.variables)
        self.assertEqual(session.get.call_count, 1)

    def test_missing_results_key(self):
        client, _ = make_client({"status_message": "oops"}, None)
        with self.assertRaises(MissingDataError):
            run(QuickAdd(ScriptedQuickAddApi("x", [])), {"TMDB_API_KEY": "k", "type": "movie"}, client=client)

    def test_series_without_seasons(self):
        details = {k: v for k, v in DARK.items() if k != "seasons"}
        client, _ = make_client(DARK_SEARCH, details)
        quick_add = QuickAdd(ScriptedQuickAddApi("Dark", [0]))

        with self.assertRaises(MissingDataError):
            run(quick_add, {"TMDB_API_KEY": "secret", "type": "tv"}, client=client)
        self.assertIsNone(quick_add.variables)

    def test_request_error_propagates(self):
        client, session = make_client(None, None)
        session.get.side_effect = TMDBRequestError("down")

        with self.assertRaises(TMDBRequestError):
            run(QuickAdd(ScriptedQuickAddApi("Dune", [])), {"TMDB_API_KEY": "k", "type": "movie"}, client=client)

    def test_builds_and_closes_own_client(self):
        with mock.patch("quickadd_tmdb.core.capture.TMDB") as tmdb_cls:
            client = tmdb_cls.return_value
            client.search.return_value = {"results": [{"id": 1, "title": "Dune"}]}
            client.get_details.return_value = {
                "id": 1, "title": "Dune", "genres": [], "original_language": "en",
            }

            run(QuickAdd(ScriptedQuickAddApi("Dune", [0])), {"TMDB_API_KEY": "abc", "type": "movie"})

        tmdb_cls.assert_called_once_with("abc")
        client.close.assert_called_once_with()


if __name__ == '__main__':
    unittest.main()
