"""
Transcript fetch example.

Demonstrates fetching and printing the transcript of a YouTube video.
"""

import logging

from transcriptkit import YouTubeClient, NoTranscriptAvailable

# Configure logging to see transcriptkit internal logs
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

def main():
    # YouTube video URL
    youtube_url = "https://www.youtube.com/watch?v=eSPJsnYY6_4"

    client = YouTubeClient()

    print(f"Fetching transcript from YouTube...")
    try:
        result = client.get_transcript(youtube_url)
    except NoTranscriptAvailable as e:
        print(e)
        return

    print(f"{result.meta.title} ({len(result.lines)} lines)")
    print(f"Thumbnail: {result.meta.thumbnail}\n")
    print(result.to_text())

if __name__ == "__main__":
    main()
