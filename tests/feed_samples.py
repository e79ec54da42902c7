"""Minimal documents for every supported dialect plus a couple of HTML pages."""

ATOM = """<?xml version="1.0" encoding="utf-8"?>
<feed xmlns="http://www.w3.org/2005/Atom">
  <title>Example Atom</title>
  <link href="https://example.com/"/>
  <id>urn:uuid:60a76c80-d399-11d9-b93C-0003939e0af6</id>
  <updated>2024-01-01T00:00:00Z</updated>
  <entry>
    <title>First post</title>
    <link href="https://example.com/first"/>
    <id>urn:uuid:1225c695-cfb8-4ebb-aaaa-80da344efa6a</id>
    <updated>2024-01-01T00:00:00Z</updated>
    <summary type="html">&lt;p&gt;Hello &lt;b&gt;world&lt;/b&gt;&lt;/p&gt;</summary>
  </entry>
</feed>
"""

RSS20 = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>Example RSS 2.0</title>
    <link>https://example.com/</link>
    <description>Example feed</description>
    <item>
      <title>First post</title>
      <link>https://example.com/first</link>
      <guid>https://example.com/first</guid>
      <pubDate>Mon, 01 Jan 2024 00:00:00 GMT</pubDate>
    </item>
  </channel>
</rss>
"""

RSS92 = """<?xml version="1.0"?>
<rss version="0.92">
  <channel>
    <title>Example RSS 0.92</title>
    <link>https://example.com/</link>
    <description>Example feed</description>
    <item>
      <title>First post</title>
      <link>https://example.com/first</link>
    </item>
  </channel>
</rss>
"""

RSS91 = """<?xml version="1.0" encoding="ISO-8859-1"?>
<!DOCTYPE rss PUBLIC "-//Netscape Communications//DTD RSS 0.91//EN"
  "http://my.netscape.com/publish/formats/rss-0.91.dtd">
<rss version="0.91">
  <channel>
    <title>Example RSS 0.91</title>
    <link>https://example.com/</link>
    <description>Example feed</description>
    <language>en-us</language>
    <item>
      <title>First post</title>
      <link>https://example.com/first</link>
    </item>
  </channel>
</rss>
"""

RSS10 = """<?xml version="1.0"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
         xmlns="http://purl.org/rss/1.0/">
  <channel rdf:about="https://example.com/">
    <title>Example RSS 1.0</title>
    <link>https://example.com/</link>
    <description>Example feed</description>
    <items>
      <rdf:Seq>
        <rdf:li resource="https://example.com/first"/>
      </rdf:Seq>
    </items>
  </channel>
  <item rdf:about="https://example.com/first">
    <title>First post</title>
    <link>https://example.com/first</link>
  </item>
</rdf:RDF>
"""

HTML_WITHOUT_FEED = """<!DOCTYPE html>
<html>
  <head><title>Just a page</title></head>
  <body><p>Nothing to see here.</p></body>
</html>
"""

HTML_WITH_RELATIVE_FEED = """<!DOCTYPE html>
<html>
  <head>
    <title>Blog</title>
    <link rel="alternate" type="application/rss+xml" title="RSS" href="/feed.xml">
  </head>
  <body><p>Posts</p></body>
</html>
"""
