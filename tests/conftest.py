"""Pytest configuration and shared fixtures.

This module provides canned CiNii Books responses (Atom feed and RDF
records) and a client with a mocked HTTP session.
"""

from unittest.mock import MagicMock

import pytest

from ciniibooks.api.client import CiNiiClient
from ciniibooks.config import Config


# ============================================================================
# Atom Feed Fixtures
# ============================================================================


ATOM_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom"
      xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/"
      xmlns:dc="http://purl.org/dc/elements/1.1/"
      xmlns:dcterms="http://purl.org/dc/terms/"
      xmlns:prism="http://prismstandard.org/namespaces/basic/2.0/"
      xmlns:cinii="http://ci.nii.ac.jp/ns/1.0/">
  <title>CiNii Books OpenSearch - 吾輩は猫である</title>
  <link rel="alternate" href="http://ci.nii.ac.jp/books/search?q=%E5%90%BE%E8%BC%A9"/>
  <link rel="self" type="application/atom+xml"
        href="http://ci.nii.ac.jp/books/opensearch/search?q=%E5%90%BE%E8%BC%A9&amp;format=atom"/>
  <id>http://ci.nii.ac.jp/books/opensearch/search?q=%E5%90%BE%E8%BC%A9</id>
  <updated>2024-05-01T12:00:00+09:00</updated>
  <opensearch:totalResults>152</opensearch:totalResults>
  <opensearch:startIndex>1</opensearch:startIndex>
  <opensearch:itemsPerPage>3</opensearch:itemsPerPage>
  <entry>
    <title>吾輩は猫である</title>
    <link href="http://ci.nii.ac.jp/ncid/BN01234567"/>
    <id>http://ci.nii.ac.jp/ncid/BN01234567</id>
    <author><name>夏目漱石</name></author>
    <author><name>Natsume, Soseki</name></author>
    <dc:publisher>岩波書店</dc:publisher>
    <prism:publicationDate>1990</prism:publicationDate>
    <dcterms:isPartOf title="岩波文庫">http://ci.nii.ac.jp/ncid/BN00012345</dcterms:isPartOf>
    <cinii:ownerCount>315</cinii:ownerCount>
  </entry>
  <entry>
    <title>漱石全集</title>
    <id>http://ci.nii.ac.jp/ncid/BA2222222X</id>
    <author><name>夏目漱石</name></author>
    <dc:publisher>岩波書店</dc:publisher>
    <prism:publicationDate>1993-1999</prism:publicationDate>
    <dcterms:hasPart>urn:isbn:9784000918015</dcterms:hasPart>
    <dcterms:hasPart>urn:isbn:9784000918022</dcterms:hasPart>
    <cinii:ownerCount>580</cinii:ownerCount>
  </entry>
  <entry>
    <title>猫の研究</title>
    <id>http://ci.nii.ac.jp/ncid/BB33333333</id>
  </entry>
</feed>
"""

EMPTY_FEED = """<?xml version="1.0" encoding="UTF-8"?>
<feed xmlns="http://www.w3.org/2005/Atom"
      xmlns:opensearch="http://a9.com/-/spec/opensearch/1.1/">
  <title>CiNii Books OpenSearch</title>
  <id>http://ci.nii.ac.jp/books/opensearch/search?q=zzzz</id>
  <opensearch:totalResults>0</opensearch:totalResults>
  <opensearch:startIndex>0</opensearch:startIndex>
  <opensearch:itemsPerPage>0</opensearch:itemsPerPage>
</feed>
"""


# ============================================================================
# RDF Record Fixtures
# ============================================================================


RDF_HEADER = """<?xml version="1.0" encoding="UTF-8"?>
<rdf:RDF xmlns:rdf="http://www.w3.org/1999/02/22-rdf-syntax-ns#"
         xmlns:rdfs="http://www.w3.org/2000/01/rdf-schema#"
         xmlns:foaf="http://xmlns.com/foaf/0.1/"
         xmlns:dc="http://purl.org/dc/elements/1.1/"
         xmlns:dcterms="http://purl.org/dc/terms/"
         xmlns:prism="http://prismstandard.org/namespaces/basic/2.0/"
         xmlns:bibo="http://purl.org/ontology/bibo/"
         xmlns:cinii="http://ci.nii.ac.jp/ns/1.0/">
"""

BIBLIOGRAPHIC_BLOCK = """
  <rdf:Description rdf:about="http://ci.nii.ac.jp/ncid/BB19132110#entity">
    <rdf:type rdf:resource="http://purl.org/ontology/bibo/Book"/>
    <foaf:isPrimaryTopicOf rdf:resource="http://ci.nii.ac.jp/ncid/BB19132110"/>
    <dc:title xml:lang="ja-Kana">ニホン ノ ネコ</dc:title>
    <dc:title>日本の猫</dc:title>
    <dcterms:alternative>Nihon no neko</dcterms:alternative>
    <dc:creator>山田太郎著</dc:creator>
    <dc:publisher>猫出版</dc:publisher>
    <dc:publisher>Neko Press</dc:publisher>
    <dc:language>jpn</dc:language>
    <dc:date>2015.4</dc:date>
    <foaf:topic rdf:resource="http://ci.nii.ac.jp/books/search?q=%E7%8C%AB" dc:title="猫"/>
    <foaf:topic rdf:resource="http://ci.nii.ac.jp/books/search?q=%E5%8B%95%E7%89%A9" dc:title="動物"/>
    <cinii:ncid>BB19132110</cinii:ncid>
    <prism:edition>第2版</prism:edition>
    <dcterms:isPartOf rdf:resource="http://ci.nii.ac.jp/ncid/BA1111#entity" dc:title="Parent Series"/>
    <dcterms:hasPart rdf:resource="urn:isbn:9784000000001" dc:title="上"/>
    <dcterms:hasPart rdf:resource="urn:isbn:9784000000002" dc:title="下"/>
    <cinii:contentOfWorks>序章</cinii:contentOfWorks>
    <cinii:contentOfWorks>猫の歴史</cinii:contentOfWorks>
    <dcterms:medium dc:title="冊子"/>
    <cinii:ownerCount>42</cinii:ownerCount>
    <bibo:lccn>2015123456</bibo:lccn>
    <rdfs:seeAlso rdf:resource="http://www.worldcat.org/oclc/123456"/>
  </rdf:Description>
"""

AUTHOR_BLOCK = """
  <rdf:Description rdf:about="http://ci.nii.ac.jp/ncid/BB19132110">
    <foaf:maker>
      <foaf:Person rdf:about="http://ci.nii.ac.jp/author/12345#entity">
        <foaf:name>山田, 太郎</foaf:name>
        <foaf:name xml:lang="ja-Kana">ヤマダ, タロウ</foaf:name>
      </foaf:Person>
    </foaf:maker>
    <foaf:maker>
      <foaf:Person rdf:about="http://ci.nii.ac.jp/author/DA67890#entity">
        <foaf:name>Smith, John</foaf:name>
      </foaf:Person>
    </foaf:maker>
  </rdf:Description>
"""

HOLDING_BLOCK = """
  <rdf:Description rdf:about="http://ci.nii.ac.jp/ncid/BB19132110#holdings">
    <bibo:owner>
      <foaf:Organization rdf:about="http://ci.nii.ac.jp/library/FA000001#entity">
        <foaf:name>東京大学 総合図書館</foaf:name>
        <rdfs:seeAlso rdf:resource="https://opac.dl.itc.u-tokyo.ac.jp/opac/opac_openurl?ncid=BB19132110"/>
      </foaf:Organization>
    </bibo:owner>
    <bibo:owner>
      <foaf:Organization rdf:about="http://ci.nii.ac.jp/library/FA000002#entity">
        <foaf:name>京都大学 附属図書館</foaf:name>
      </foaf:Organization>
    </bibo:owner>
  </rdf:Description>
"""

RDF_FOOTER = "</rdf:RDF>\n"

FULL_RECORD = RDF_HEADER + BIBLIOGRAPHIC_BLOCK + AUTHOR_BLOCK + HOLDING_BLOCK + RDF_FOOTER
BIBLIOGRAPHIC_ONLY_RECORD = RDF_HEADER + BIBLIOGRAPHIC_BLOCK + RDF_FOOTER


@pytest.fixture
def atom_feed() -> bytes:
    """Search response with three entries."""
    return ATOM_FEED.encode("utf-8")


@pytest.fixture
def empty_feed() -> bytes:
    """Search response with no entries."""
    return EMPTY_FEED.encode("utf-8")


@pytest.fixture
def full_record() -> bytes:
    """Record with bibliographic, author, and holding blocks."""
    return FULL_RECORD.encode("utf-8")


@pytest.fixture
def bibliographic_only_record() -> bytes:
    """Record with only the bibliographic block."""
    return BIBLIOGRAPHIC_ONLY_RECORD.encode("utf-8")


# ============================================================================
# Client Fixtures
# ============================================================================


@pytest.fixture
def config() -> Config:
    """Config with a test appid."""
    return Config(appid="test-appid", timeout=5)


@pytest.fixture
def client(config: Config) -> CiNiiClient:
    """Create a client with mocked session."""
    client = CiNiiClient(config)
    client._session = MagicMock()
    return client


@pytest.fixture
def mock_response():
    """Factory for successful mocked responses with a given body."""

    def _make(body: bytes) -> MagicMock:
        response = MagicMock()
        response.content = body
        response.status_code = 200
        response.raise_for_status = MagicMock()
        return response

    return _make
