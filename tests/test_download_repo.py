import httpx
import pytest

from gitdown.domain.exceptions import PickerInterruptedError, TreeDoesNotExistError
from gitdown.infrastructure.github_rest_adapter import GitHubRestAdapter
from gitdown.services.download_repo import DownloadRepoUseCase
from gitdown.domain.value_objects import RepositoryRef
from gitdown.services.fetch_scheduler import FetchScheduler

API = "https://api.github.com/repos"
RAW = "https://raw.githubusercontent.com"

TREE = {
    "sha": "abc123",
    "tree": [
        {"path": "a.txt", "type": "blob", "size": 1},
        {"path": "dir", "type": "tree"},
        {"path": "b.txt", "type": "blob", "size": 1},
    ],
    "truncated": False,
}


def _github(requests: list[str]):
    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(str(request.url))
        if request.url.host == "api.github.com":
            if request.url.path == "/repos/owner/demo/git/trees/main":
                return httpx.Response(200, json=TREE)
            return httpx.Response(404, json={"message": "Not Found"})
        name = request.url.path.rsplit("/", 1)[-1]
        return httpx.Response(200, text=f"contents of {name}\n")

    return handler


def _use_case(client, picker, dest) -> DownloadRepoUseCase:
    adapter = GitHubRestAdapter(client, api_root=API)
    return DownloadRepoUseCase(
        repo_fetcher=adapter,
        picker=picker,
        scheduler=FetchScheduler(adapter, dest_dir=dest, raw_base=RAW),
    )


@pytest.mark.asyncio
async def test_end_to_end_downloads_only_chosen_file(
    tmp_path, repo, make_client, stub_picker_cls
) -> None:
    requests: list[str] = []
    picker = stub_picker_cls(["b.txt"])

    async with make_client(_github(requests)) as client:
        chosen = await _use_case(client, picker, tmp_path).execute(repo)

    assert picker.offered == ["a.txt", "b.txt"]
    assert chosen == ("b.txt",)
    assert requests == [
        f"{API}/owner/demo/git/trees/main?recursive=1",
        f"{RAW}/owner/demo/main/b.txt",
    ]
    assert [p.name for p in tmp_path.iterdir()] == ["b.txt"]
    assert (tmp_path / "b.txt").read_text(encoding="utf-8") == "contents of b.txt\n"


@pytest.mark.asyncio
async def test_empty_choice_downloads_nothing(
    tmp_path, repo, make_client, stub_picker_cls
) -> None:
    requests: list[str] = []

    async with make_client(_github(requests)) as client:
        chosen = await _use_case(client, stub_picker_cls([]), tmp_path).execute(repo)

    assert chosen == ()
    assert len(requests) == 1
    assert list(tmp_path.iterdir()) == []


@pytest.mark.asyncio
async def test_unknown_ref_aborts_before_picking(
    tmp_path, make_client, stub_picker_cls
) -> None:
    picker = stub_picker_cls(["a.txt"])

    async with make_client(_github([])) as client:
        with pytest.raises(TreeDoesNotExistError):
            await _use_case(client, picker, tmp_path).execute(
                RepositoryRef(owner="owner", name="demo", ref="nope")
            )

    assert picker.offered is None


class _InterruptedPicker:
    def select(self, items):
        list(items)
        raise PickerInterruptedError()


@pytest.mark.asyncio
async def test_picker_interruption_aborts_before_fetching(tmp_path, repo, make_client) -> None:
    requests: list[str] = []

    async with make_client(_github(requests)) as client:
        with pytest.raises(PickerInterruptedError):
            await _use_case(client, _InterruptedPicker(), tmp_path).execute(repo)

    assert len(requests) == 1
    assert list(tmp_path.iterdir()) == []
