"""
Custom strategy chain example.

Demonstrates restricting retrieval to specific caption strategies and
inspecting the available tracks before downloading one.
"""

from transcriptkit import FetchConfig, YouTubeClient, select_track

def main():
    # Skip yt-dlp and only try the page scrape, then the web client API
    config = FetchConfig(strategies=("watch_page", "web"), language="de")
    client = YouTubeClient(config=config)

    video_id = "eSPJsnYY6_4"
    tracks = client.list_caption_tracks(video_id)
    for track in tracks:
        print(f"{track.language_code}: {track.name} ({track.kind or 'manual'})")

    track = select_track(tracks, config.language)
    lines = client.download_track(track, video_id)
    print(f"\nDownloaded {len(lines)} lines from '{track.language_code}' track")

if __name__ == "__main__":
    main()
